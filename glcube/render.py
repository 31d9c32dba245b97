"""The render context, the per-frame scene update and the command entry point."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

from .camera import Camera, Key
from .linalg import (
    G_PI_3,
    G_PI_6,
    Mat4,
    perspective_right_handed,
    quaternion_rotation,
    translation,
)
from .mesh import GRAY, DrawCall, Primitive, arrow, cube
from .shader import DEFAULT_FRAGMENT_PATH, DEFAULT_VERTEX_PATH, Shader, ShaderError

NEAR = 0.1
FAR = 100.0
KEYBOARD_SPEED = 0.05
ROTATION_STEP = 0.05

MouseState = Tuple[int, int, bool]


@dataclass(frozen=True)
class RenderContext:
    """Window size and title the scene is drawn into."""

    width: int
    height: int
    window_name: str = "glcube"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"window size must be positive, got {self.width}x{self.height}")

    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height


@dataclass(frozen=True)
class Frame:
    """What one frame clears to, sends to the shader and draws."""

    clear_color: Tuple[float, float, float, float]
    depth_test: bool
    uniforms: Dict[str, Mat4]
    draws: Tuple[DrawCall, ...]


class Scene:
    """A coloured cube and axis arrows seen through a user camera."""

    def __init__(self, context: RenderContext, shader: Shader) -> None:
        self.context = context
        self.shader = shader
        self.cube = cube()
        self.arrow = arrow()
        self.camera = Camera(context.width, context.height)
        self.model = translation(0.0, 0.0, -1.0)
        self.projection = Mat4.identity()
        self.rotation = Mat4.identity()
        self.step = 1.0

    def frame(
        self, keys: Iterable[Key] = (), mouse: Optional[MouseState] = None
    ) -> Frame:
        """Apply input, update the uniforms and describe the draws of one frame."""
        self.camera.process_keyboard(keys, KEYBOARD_SPEED)
        if mouse is not None:
            x, y, pressed = mouse
            self.camera.process_mouse(x, y, pressed)

        self.projection = perspective_right_handed(
            G_PI_3, self.context.aspect_ratio(), NEAR, FAR, self.projection
        )
        self.rotation = quaternion_rotation(G_PI_6 * self.step, (1.0, 0.0, 0.0))

        uniforms = {
            "projectionM": self.projection,
            "modelM": self.camera.view,
            "rotM": self.rotation,
        }
        for name, mat in uniforms.items():
            self.shader.set_matrix4_uniform(name, mat)

        draws = (self.cube.draw(Primitive.TRIANGLES), self.arrow.draw(Primitive.LINES))
        self.step += ROTATION_STEP
        return Frame((*GRAY, 0.0), True, uniforms, draws)


_KEY_LETTERS = {key.value: key for key in Key}


def _parse_keys(text: str) -> Tuple[Key, ...]:
    try:
        return tuple(_KEY_LETTERS[letter] for letter in text.lower())
    except KeyError as exc:
        raise argparse.ArgumentTypeError(f"unknown key {exc.args[0]!r}") from None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the scene for a number of frames, printing the camera view each frame."""
    parser = argparse.ArgumentParser(prog="glcube")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--name", default="glcube")
    parser.add_argument("--frames", type=int, default=1)
    parser.add_argument("--keys", type=_parse_keys, default=(),
                        help="keys held every frame, from w, a, s, d")
    parser.add_argument("--vertex", default=DEFAULT_VERTEX_PATH)
    parser.add_argument("--fragment", default=DEFAULT_FRAGMENT_PATH)
    args = parser.parse_args(argv)

    try:
        context = RenderContext(args.width, args.height, args.name)
    except ValueError as exc:
        parser.error(str(exc))
    try:
        shader = Shader.load(args.vertex, args.fragment)
    except ShaderError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"{context.window_name} is running ...")
    scene = Scene(context, shader)
    try:
        for _ in range(args.frames):
            scene.frame(args.keys)
            sys.stdout.write(scene.camera.view.format())
    finally:
        shader.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())
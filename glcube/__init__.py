"""Matrix math, a camera, mesh data, shader uniforms and a frame-by-frame scene for a 3D cube."""

__version__ = "0.1.0"
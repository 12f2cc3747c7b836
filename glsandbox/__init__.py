"""Meshes, shapes, lights, camera, shaders, textures and scenes for OpenGL sandboxes."""

__version__ = "0.1.0"
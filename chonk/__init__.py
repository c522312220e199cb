"""Voxel chunk renderer: blocks, chunk meshes, camera, shaders, textures and a viewer."""

__version__ = "0.1.0"
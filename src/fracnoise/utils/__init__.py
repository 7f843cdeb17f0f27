"""Utilities package."""

from .seed import Generator, TorchGenerator, get_generator, get_torch_generator

__all__ = ["Generator", "TorchGenerator", "get_generator", "get_torch_generator"]

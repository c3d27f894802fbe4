from .color_types import ColorSpace, SPACE_ARITY

__all__ = ["ColorSpace", "SPACE_ARITY"]

from .rgba import RGBA
from .normalizer import AnchorInput, normalize_anchor
from . import samples

__all__ = ["RGBA", "AnchorInput", "normalize_anchor", "samples"]

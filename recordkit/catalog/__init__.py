from .catalog import Catalog
from . import schemas

__all__ = ["Catalog", "schemas"]

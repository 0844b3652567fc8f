from storefront.models.favorite import Favorite
from storefront.models.thing import Thing
from storefront.models.user import User

__all__ = [
    "Favorite",
    "Thing",
    "User",
]

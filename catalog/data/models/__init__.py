#import every model so SQLAlchemy registers it in Base.metadata

from catalog.data.models.product import ProductModel
from catalog.data.models.order import OrderModel
from catalog.data.models.user import UserModel
from catalog.data.models.credential import CredentialModel

__all__ = ["ProductModel", "OrderModel", "UserModel", "CredentialModel"]

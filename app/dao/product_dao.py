from app.dao.base_dao import BaseDAO
from app.models.product import Product


class ProductDAO(BaseDAO[Product]):
    def __init__(self):
        super().__init__(Product)


product_dao = ProductDAO()

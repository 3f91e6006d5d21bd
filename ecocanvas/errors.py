class EcoCanvasError(Exception):
    """Base exception for the project."""


class CatalogLoadError(EcoCanvasError):
    """Raised when the product catalog file cannot be loaded."""


class ProductNotFoundError(EcoCanvasError):
    """Raised when a product id is not in the catalog."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id

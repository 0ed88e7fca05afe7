"""Low stock alert, sent to the vendor owning the product."""


class LowStockTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        product_name = context.get("product_name", "N/A")
        product_id = context.get("product_id", "N/A")
        stock = context.get("stock_quantity", 0)
        threshold = context.get("threshold", 0)
        return {
            "subject": f"[Low Stock] {product_name}",
            "body": (
                f"Stock for {product_name} ({product_id}) is down to {stock} units, "
                f"below the threshold of {threshold}.\n\n"
                "Please restock soon."
            ),
        }

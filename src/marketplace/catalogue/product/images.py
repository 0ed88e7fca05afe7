"""Product images: file storage and the command that points a product at one.

Uploaded files are written under the configured upload directory with a
random prefix, so two uploads of ``mug.png`` never overwrite each other. The
product keeps the public path (``/uploads/<name>``), not the disk path.
"""

from pathlib import Path, PurePath
from uuid import uuid4

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product
from marketplace.config import get_settings
from marketplace.domain import marketplace

logger = structlog.get_logger(__name__)


def store_image(filename: str | None, content: bytes) -> str:
    """Write ``content`` to the upload directory and return its public path."""
    if not content:
        raise ValidationError({"image_file": ["No file uploaded"]})

    storage = get_settings().storage
    # Drop any directory parts the client sent along with the name
    base_name = PurePath((filename or "image").replace("\\", "/")).name or "image"
    stored_name = f"{uuid4()}_{base_name}"

    upload_dir = Path(storage.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    (upload_dir / stored_name).write_bytes(content)

    logger.info("Image stored", file=stored_name, size=len(content))
    return f"{storage.public_prefix.rstrip('/')}/{stored_name}"


@marketplace.command(part_of="Product")
class AttachProductImage:
    product_id = Identifier(required=True)
    image_path = String(required=True, max_length=500)


@marketplace.command_handler(part_of=Product)
class ProductImageHandler:
    @handle(AttachProductImage)
    def attach_product_image(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.attach_image(command.image_path)
        repo.add(product)
        return product.image_path

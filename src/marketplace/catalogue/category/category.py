"""Category aggregate: a named grouping of products that can be switched off."""

from protean.exceptions import ValidationError
from protean.fields import Boolean, String

from marketplace.domain import marketplace
from marketplace.shared.ids import new_object_id


@marketplace.aggregate(limit=None)
class Category:
    name = String(required=True, max_length=100)
    is_active = Boolean(default=True)

    @classmethod
    def create(cls, name, is_active=True):
        return cls(id=new_object_id(), name=name, is_active=is_active)

    def rename(self, name):
        if not name or not name.strip():
            raise ValidationError({"name": ["Category name cannot be blank"]})

        self.name = name.strip()

    def activate(self):
        self.is_active = True

    def deactivate(self):
        self.is_active = False

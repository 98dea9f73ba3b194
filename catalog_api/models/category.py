# Category model, parent side of the category -> products relation
from catalog_api.extensions import db


class Category(db.Model):
    __tablename__ = "category"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(128), nullable=False)
    description = db.Column(db.Text, nullable=True)

    # Removing a category removes its products
    products = db.relationship(
        "Product",
        back_populates="category",
        cascade="all, delete-orphan",
        order_by="Product.name",
    )

    @classmethod
    def create_from_dto(cls, dto):
        return cls(name=dto.name, description=dto.description)

    def matches(self, dto):
        return self.name == dto.name and self.description == dto.description

    def to_dict(self, include_products=True):
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
        }
        if include_products:
            data["products"] = [p.to_dict(include_category=False) for p in self.products]
        return data

    def __repr__(self):
        return f"<Category(id={self.id}, name={self.name!r})>"

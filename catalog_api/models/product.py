# Product model, always attached to a category
from catalog_api.extensions import db


class Product(db.Model):
    __tablename__ = "product"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(128), nullable=False)
    description = db.Column(db.Text, nullable=True)
    price = db.Column(db.Float, nullable=False)

    category_id = db.Column(
        db.Integer,
        db.ForeignKey("category.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    category = db.relationship("Category", back_populates="products")

    @classmethod
    def create_from_dto(cls, dto, category):
        return cls(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            category=category,
        )

    def matches(self, dto):
        return (
            self.name == dto.name
            and self.description == dto.description
            and self.price == dto.price
            and self.category_id == dto.category_id
        )

    def to_dict(self, include_category=True):
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
        }
        if include_category:
            data["category"] = self.category.to_dict(include_products=False) if self.category else None
        return data

    def __repr__(self):
        return (
            f"<Product(id={self.id}, name={self.name!r}, "
            f"price={self.price}, category_id={self.category_id})>"
        )

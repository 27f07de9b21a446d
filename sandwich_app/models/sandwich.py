from sandwich_app.extensions import db
from sandwich_app.models.base import RecordMixin

sandwich_ingredients = db.Table(
    "sandwich_ingredients",
    db.Column("sandwich_id", db.String(36), db.ForeignKey("sandwiches.id"), primary_key=True),
    db.Column("ingredient_id", db.String(36), db.ForeignKey("ingredients.id"), primary_key=True),
)


class Sandwich(RecordMixin, db.Model):
    __tablename__ = "sandwiches"

    name = db.Column(db.String(150), nullable=False)
    bread_id = db.Column(db.String(36), db.ForeignKey("breads.id"), nullable=False)
    sauce_id = db.Column(db.String(36), db.ForeignKey("sauces.id"), nullable=True)

    bread = db.relationship("Bread")
    sauce = db.relationship("Sauce")
    ingredients = db.relationship("Ingredient", secondary=sandwich_ingredients, order_by="Ingredient.created_at")

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "bread_id": self.bread_id,
            "ingredient_ids": [ing.id for ing in self.ingredients],
            "sauce_id": self.sauce_id,
            **self._timestamps(),
        }

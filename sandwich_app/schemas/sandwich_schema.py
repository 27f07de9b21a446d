from marshmallow import Schema, fields, validate


class NamedItemSchema(Schema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=150))


class SandwichSchema(Schema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=150))
    bread_id = fields.Str(required=True, validate=validate.Length(min=1))
    ingredient_ids = fields.List(fields.Str(validate=validate.Length(min=1)), required=True, validate=validate.Length(min=1))
    sauce_id = fields.Str(allow_none=True, load_default=None)


class TodoSchema(Schema):
    content = fields.Str(allow_none=True, load_default=None)


CREATE_SCHEMAS = {
    "breads": NamedItemSchema,
    "ingredients": NamedItemSchema,
    "sauces": NamedItemSchema,
    "sandwiches": SandwichSchema,
    "todos": TodoSchema,
}

from aspects.exceptions import ValidationError
from aspects.fields.base import Field
from aspects.utils.reflection import id_field


class Reference(Field):
    """
    A field holding another entity instance.

    `to_cls` can be the entity class itself, or the name it was registered
    under. Names are resolved through the registry whenever a value is set,
    which allows an entity to reference its own class before the class body
    has finished executing.
    """

    default_error_messages = {
        "invalid": "{value!r} is not an instance of {to_cls}.",
    }

    def __init__(self, to_cls, **kwargs):
        if kwargs.get("identifier"):
            raise ValidationError({"identifier": ["References cannot be identifiers"]})

        super().__init__(**kwargs)
        self._to_cls = to_cls

    @property
    def to_cls(self):
        if isinstance(self._to_cls, str):
            from aspects import registry

            return registry.fetch(self._to_cls)

        return self._to_cls

    def _cast_to_type(self, value):
        if not isinstance(value, self.to_cls):
            self.fail("invalid", value=value, to_cls=self.to_cls.__name__)

        return value

    def as_dict(self, value):
        """Render the referenced entity as its identity"""
        if value is None:
            return None

        identifier = getattr(value, id_field(value).field_name)
        return identifier if isinstance(identifier, int) else str(identifier)

    def __repr__(self):
        to_cls_name = (
            self._to_cls if isinstance(self._to_cls, str) else self._to_cls.__name__
        )
        values = [f"'{to_cls_name}'", *self._generic_param_values_for_repr()]

        return f"{self.__class__.__name__}(" + ", ".join(values) + ")"

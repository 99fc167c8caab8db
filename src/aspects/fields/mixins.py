class FieldDescriptorMixin:
    """Provide basic implementation to treat the Field as a descriptor"""

    def __init__(self, *args, **kwargs):
        """Initialize common Field Attributes"""
        # Set up when the owner (Entity class) adds the field to itself
        self.field_name = None
        self.description = kwargs.pop("description", None)

    def __set_name__(self, entity_cls, name):
        self.field_name = name

    def __get__(self, instance, owner):
        """Placeholder for handling `getattr` operations on attributes"""
        raise NotImplementedError

    def __set__(self, instance, value):
        """Placeholder for handling `setattr` operations on attributes"""
        raise NotImplementedError

    def __delete__(self, instance):
        """Placeholder for handling `del` operations on attributes"""
        raise NotImplementedError

"""Entity Functionality and Classes"""

import functools
import inspect
import logging
from collections import defaultdict

import inflection

from aspects.exceptions import (
    IncorrectUsageError,
    NotSupportedError,
    ValidationError,
)
from aspects.fields import Integer
from aspects.utils.container import (
    BaseContainer,
    IdentityMixin,
    OptionsMixin,
    load_values,
)
from aspects.utils.reflection import id_field

logger = logging.getLogger(__name__)


class _EntityState:
    """Store entity instance state."""

    def __init__(self):
        self._new = True
        self._changed = False
        self._destroyed = False

    @property
    def is_new(self):
        return self._new

    @property
    def is_persisted(self):
        return not self._new

    @property
    def is_changed(self):
        return self._changed

    @property
    def is_destroyed(self):
        return self._destroyed

    def mark_new(self):
        self._new = True

    def mark_saved(self):
        self._new = False
        self._changed = False

    def mark_changed(self):
        if not (self._new or self._destroyed):
            self._changed = True

    def mark_destroyed(self):
        self._destroyed = True
        self._changed = False


class BaseEntity(OptionsMixin, IdentityMixin, BaseContainer):
    """The Base class for Entities.

    An entity is identified by its identity field, not by its data. Declare
    attributes with fields::

        class User(BaseEntity):
            first_name = String(required=True, max_length=50)
            last_name = String(required=True, max_length=50)
            age = Integer(default=5)

    An `id` field holding a generated identity is added unless an identifier
    field is declared, or the entity's ``Meta`` sets ``auto_add_id_field = False``.

    Options are declared on an inner ``Meta`` class:

    - ``abstract``: the entity cannot be instantiated.
    - ``frozen``: fields cannot be assigned once the entity is initialized.
    - ``schema_name``: name used by external stores, defaults to the
      underscored class name.

    `_version` is a revision stamp owned by whatever persists the entity.
    Entities store it as supplied and never change it; `-1` means no version.
    """

    _version = Integer(default=-1)

    def __init_subclass__(subclass, **kwargs) -> None:
        super().__init_subclass__(**kwargs)

        # Record invariant methods
        invariants = defaultdict(dict)
        for method_name, method in inspect.getmembers(
            subclass, predicate=inspect.isroutine
        ):
            if not (
                method_name.startswith("__") and method_name.endswith("__")
            ) and hasattr(method, "_invariant"):
                invariants[method._invariant][method_name] = method
        setattr(subclass, "_invariants", invariants)

    @classmethod
    def _default_options(cls):
        return [
            ("auto_add_id_field", True),
            ("frozen", False),
            ("schema_name", inflection.underscore(cls.__name__)),
        ]

    def __init__(self, *template, **kwargs):
        """
        Initialise the entity object.

        This initialization technique supports keyword arguments as well as
        dictionaries. The objects initialized in the following example have
        the same structure::

            user1 = User({'first_name': 'John', 'last_name': 'Doe'})

            user2 = User(first_name='John', last_name='Doe')

        All validation errors, from fields and from `@invariant.post` methods,
        are raised together in a single `ValidationError`.
        """
        self._initialized = False

        if self.__class__ is BaseEntity or self.meta_.abstract is True:
            raise NotSupportedError(
                f"{self.__class__.__name__} class has been marked abstract"
                f" and cannot be instantiated"
            )

        self.state_ = _EntityState()

        self.errors = load_values(self, *template, **kwargs)

        self.defaults()

        self._initialized = True

        # Invariants are only meaningful once every field loaded cleanly
        if not self.errors:
            custom_errors = self._postcheck(return_errors=True) or {}
            for field_name in custom_errors:
                self.errors[field_name].extend(custom_errors[field_name])

        if self.errors:
            logger.error(f"Error during initialization: {dict(self.errors)}")
            raise ValidationError(self.errors)

    def defaults(self):
        """Placeholder method for defaults.
        To be overridden in concrete entities, when an attribute's default
        depends on other attribute values.
        """

    def __setattr__(self, name, value):
        if self.meta_.frozen and getattr(self, "_initialized", False):
            raise IncorrectUsageError(
                f"`{self.__class__.__name__}` entities are frozen and cannot be "
                f"modified once created"
            )

        super().__setattr__(name, value)

    def _run_invariants(self, stage, return_errors=False):
        """Run invariants for a given stage."""
        if self._initialized:
            errors = defaultdict(list)

            for invariant_method in self._invariants[stage].values():
                try:
                    invariant_method(self)
                except ValidationError as err:
                    for field_name in err.messages:
                        errors[field_name].extend(err.messages[field_name])

            if return_errors:
                return errors

            if errors:
                raise ValidationError(errors)

    def _precheck(self, return_errors=False):
        """Invariant checks performed before entity changes"""
        return self._run_invariants("pre", return_errors=return_errors)

    def _postcheck(self, return_errors=False):
        """Invariant checks performed after initialization and attribute changes"""
        return self._run_invariants("post", return_errors=return_errors)

    def __eq__(self, other):
        """Equivalence check to be based only on Identity"""
        if type(other) is type(self):
            self_id = getattr(self, id_field(self).field_name)
            other_id = getattr(other, id_field(other).field_name)

            return self_id == other_id

        return False

    def __hash__(self):
        """Overrides the default implementation and bases hashing on identity"""
        return hash(getattr(self, id_field(self).field_name))

    def __repr__(self):
        return "<%s: %s>" % (self.__class__.__name__, self)

    def __str__(self):
        identifier = getattr(self, id_field(self).field_name)
        return "%s object (%s)" % (
            self.__class__.__name__,
            "{}: {}".format(id_field(self).field_name, identifier),
        )


class invariant:
    @staticmethod
    def pre(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        setattr(wrapper, "_invariant", "pre")
        return wrapper

    @staticmethod
    def post(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        setattr(wrapper, "_invariant", "post")
        return wrapper

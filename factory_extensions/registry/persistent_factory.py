"""
Base factory for models that persist themselves.

Models used with PersistentFactory follow a small protocol:

- ``save()`` persists best-effort and must not raise on invalid data
- ``save_strict()`` persists or raises ValidationFailed
"""

import factory

from factory_extensions.core.errors import FactoryDefinitionError


class PersistentFactory(factory.Factory):
    """factory_boy base whose create strategy builds the model then calls save_strict()."""

    class Meta:
        abstract = True

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        instance = model_class(*args, **kwargs)
        save_strict = getattr(instance, 'save_strict', None)
        if save_strict is None:
            raise FactoryDefinitionError(
                f"{model_class.__name__} does not implement save_strict()"
            )
        save_strict()
        return instance

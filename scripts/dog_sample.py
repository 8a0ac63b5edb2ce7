#!/usr/bin/env python3
"""
Walk through the Dog class extensions and print each result.

Usage: dog_sample.py [config.yaml]
"""

import logging
import sys

from factory_extensions import FactoryExtensions, FactoryRegistry, GenerationDispatcher, PersistentFactory
from factory_extensions.config_factory import ConfigError, configure_logging, load_config, load_config_from_yaml

logger = logging.getLogger(__name__)


class Dog(FactoryExtensions):
    def __init__(self, name=None, breed=None):
        self.name = name
        self.breed = breed
        self.is_saved = None

    def save(self):
        self.is_saved = "Saved via save()"

    def save_strict(self):
        self.is_saved = "Saved via save_strict()"

    def __repr__(self):
        return f"Dog(name={self.name!r}, breed={self.breed!r}, is_saved={self.is_saved!r})"


class DogFactory(PersistentFactory):
    class Meta:
        model = Dog

    name = 'Rover'
    breed = 'Golden Retriever'


def show(label, produce):
    print(f">> {label}")
    try:
        print(f"=> {produce()!r}")
    except Exception as e:
        print(f"Exception raised: {type(e).__name__}: {e}")


def main():
    """Run the sample."""
    try:
        config = load_config_from_yaml(sys.argv[1]) if len(sys.argv) > 1 else load_config()
    except (ConfigError, OSError) as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)
    configure_logging(config)

    registry = FactoryRegistry()
    registry.register('dog', DogFactory)
    Dog.factory_dispatcher = GenerationDispatcher(registry, config=config)
    logger.debug(f"Registered factories: {registry.get_factory_names()}")

    show("Dog.build()", lambda: Dog.build())
    show("Dog.build(overrides={'name': 'Spot'})", lambda: Dog.build(overrides={'name': 'Spot'}))
    show("Dog.gen()", lambda: Dog.gen())
    show("Dog.gen(overrides={'name': 'Spot'})", lambda: Dog.gen(overrides={'name': 'Spot'}))
    show("Dog.gen_strict()", lambda: Dog.gen_strict())
    show("Dog.gen_strict(overrides={'name': 'Spot'})", lambda: Dog.gen_strict(overrides={'name': 'Spot'}))
    show("Dog.attrs()", lambda: Dog.attrs())
    show("Dog.gen('puppy')", lambda: Dog.gen('puppy'))


if __name__ == '__main__':
    main()

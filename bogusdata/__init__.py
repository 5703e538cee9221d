"""bogusdata - fill a fresh directory with throwaway test files.

Example:
    >>> from bogusdata import Configuration, Generator, Scenario
    >>> config = Configuration(scenario=Scenario.RANDOM, max_total_size=10_000_000)
    >>> result = Generator(config).run()
"""

__version__ = "0.1.0"

from bogusdata.config import Configuration, ConfigurationException, Scenario, SizeMode
from bogusdata.generator import GeneratedFile, GenerationResult, Generator

__all__ = [
    "Configuration",
    "ConfigurationException",
    "Scenario",
    "SizeMode",
    "GeneratedFile",
    "GenerationResult",
    "Generator",
    "__version__",
]

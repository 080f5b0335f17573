class IndexerError(Exception):
    """Base class for exceptions thrown while generating an ingredient index."""


class ConfigError(IndexerError):
    """Base class for errors in the arguments given to the indexer."""


class RecipeRootNotFoundError(ConfigError):
    """Thrown when the recipe collection root does not exist or is not a directory."""


class RecipeRootUnreadableError(ConfigError):
    """Thrown when the recipe collection root cannot be listed."""


class InvalidBaseURLError(ConfigError):
    """Thrown when the base URL for recipe links is malformed."""


class MultipleReadmeError(ConfigError):
    """Thrown when a recipe collection contains multiple index.md or readme.md files."""


class ReadmeMissingTitleError(ConfigError):
    """Thrown when an readme.md file is missing a <h1> level title."""


class ReadmeMalformedTitleError(ConfigError):
    """Thrown when an readme.md file's <h1> title contains anything but simple text."""


class ReadmeUnreadableError(ConfigError):
    """Thrown when an readme.md file cannot be read."""


class RecipeLoadError(IndexerError):
    """Thrown when a recipe file cannot be read or parsed."""


class IndexFinalizedError(IndexerError):
    """Thrown when adding to an index which has already been finalized."""


class OutputWriteError(IndexerError):
    """Thrown when the generated index cannot be written out."""

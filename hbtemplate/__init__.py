"""Building blocks of a Handlebars-style template engine: errors, JSON values, paths, block scopes, context navigation, helpers and case conversion."""

__version__ = "0.1.0"
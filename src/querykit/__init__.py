"""
querykit – query-parameter compiler for list endpoints.

Import path convention::

    from querykit.application.schema import FieldSchema, FieldType
    from querykit.application.filtering import QueryCompiler, FilterSpecification
    from querykit.kernel.errors import CompileError, ErrorKind
    from querykit.adapters.fastapi import FastAPIExceptionMapper, filter_spec_dependency
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

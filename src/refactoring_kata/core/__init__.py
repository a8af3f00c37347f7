"""
Core domain models, numeric primitives, and document contracts.

This module contains the building blocks shared by the province and
billing models. Nothing here performs I/O except loading packaged schemas.
"""

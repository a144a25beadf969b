"""
Model registry for the licenses app.

Django discovers models through this module; the definitions live
in the infrastructure layer.
"""
from licenses.infrastructure.models import LicenseRecord  # noqa: F401

from .namespaces import NamespacesService

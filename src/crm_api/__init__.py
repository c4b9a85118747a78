"""crm-api: single action customer and user management service.

Each use case (create, get, update, activate, ...) is one service class and one
HTTP route. Customers and users share a single generic account component.
"""

__version__ = "0.1.0"

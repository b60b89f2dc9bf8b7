from .api import ContactsApiError, ContactsClient
from .app import ContactsApp

__all__ = ['ContactsApiError', 'ContactsClient', 'ContactsApp']

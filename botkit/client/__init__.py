from .async_client import AsyncClient, AsyncClientConfig
from .base_client import ClientConfig, RequestDispatcher

"""In-memory TF-IDF search server package."""

from loguru import logger

from .document import Document, DocumentStatus, format_match
from .exceptions import InvalidArgument, OutOfRange, SearchServerError
from .paginator import Page, Paginator, paginate
from .request_queue import RequestQueue
from .search_server import SearchServer

# Silent unless the embedding application calls setup_logging().
logger.disable("search_server")

"""Asynchronous client for the Geometry Dash server API."""

from gd_client.cache import ResultCache as ResultCache
from gd_client.client import AuthenticatedGDClient as AuthenticatedGDClient
from gd_client.client import GDClient as GDClient
from gd_client.client import login as login
from gd_client.config import Config as Config
from gd_client.entities import DemonDifficulty as DemonDifficulty
from gd_client.entities import LeaderboardType as LeaderboardType
from gd_client.errors import BadResponseError as BadResponseError
from gd_client.errors import CorruptedResponseError as CorruptedResponseError
from gd_client.errors import GDError as GDError
from gd_client.errors import InvalidArgumentError as InvalidArgumentError
from gd_client.errors import MissingAccessError as MissingAccessError
from gd_client.paginator import Paginator as Paginator
from gd_client.session import Session as Session

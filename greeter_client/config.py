# -*- coding: utf-8 -*-
import os
from typing import Sequence

from jinja2 import Template
from pydantic import BaseModel, Field

from greeter_client.channel import DEFAULT_SHUTDOWN_TIMEOUT
from greeter_client.exceptions import UsageRequested

DEFAULT_FIRST_NAME = "Sabrine"
DEFAULT_LAST_NAME = "Kammoun"
DEFAULT_CIN = "1234567"
# a server running on the local machine
DEFAULT_TARGET = "localhost:50051"

LOGLEVEL_ENV = "GREETER_CLIENT_LOGLEVEL"

# positional order on the command line
POSITIONAL_FIELDS = ("first_name", "last_name", "cin", "target")

USAGE_TEMPLATE = """Usage: [firstName lastName cin [target]]

  firstName   The first name of the person you wish to be greeted by. Defaults to {{ settings.first_name }}
  lastName    The last name of the person you wish to be greeted by. Defaults to {{ settings.last_name }}
  cin         The Client Identification Number (CIN) of the person. Defaults to {{ settings.cin }}
  target      The server to connect to. Defaults to {{ settings.target }}
"""


class ClientSettings(BaseModel):
    first_name: str = DEFAULT_FIRST_NAME
    last_name: str = DEFAULT_LAST_NAME
    cin: str = DEFAULT_CIN
    target: str = DEFAULT_TARGET
    shutdown_timeout: float = DEFAULT_SHUTDOWN_TIMEOUT
    log_level: str = Field(default_factory=lambda: os.environ.get(LOGLEVEL_ENV, "INFO"))


def parse_args(argv: Sequence[str]) -> ClientSettings:
    """
    Build settings from positional arguments: first name, last name, cin, target.

    Missing trailing arguments keep their defaults and extra ones are ignored.
    `--help` is only recognised as the first argument.
    """
    if argv and argv[0] == "--help":
        raise UsageRequested()
    values = dict(zip(POSITIONAL_FIELDS, argv))
    return ClientSettings(**values)


def render_usage() -> str:
    return Template(USAGE_TEMPLATE).render(settings=ClientSettings())

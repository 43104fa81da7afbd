# ==============================================================================
#  Copyright 2025 Matthew Pounsett <matt@conundrum.com>
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
# ==============================================================================
"""Constructor injection example.

The injector hands out freshly built objects on every call. There is no
caching, scoping or graph resolution.
"""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class Service:
    """The dependency handed to a Client."""

    def perform_action(self) -> str:
        """Perform the service action.

        Returns:
            A message naming the service class that acted.
        """
        logger.info("Performing action in %s", type(self).__name__)
        return f"Performing action in {type(self).__name__}"


class Client:
    """Consumer that receives its Service through the constructor."""

    def __init__(self, service: Service) -> None:
        """Create a client.

        Args:
            service: The service this client delegates to.
        """
        self.service = service

    def do_something(self) -> str:
        """Delegate to the injected service.

        Returns:
            The service's result.
        """
        return self.service.perform_action()


class Injector:
    """Builds services and clients."""

    @staticmethod
    def provide_service() -> Service:
        """Return a new Service."""
        return Service()

    @classmethod
    def provide_client(cls) -> Client:
        """Return a new Client wired with a new Service."""
        return Client(cls.provide_service())

    @classmethod
    def providers(cls) -> dict[str, Callable[[], Any]]:
        """Map provider names to their constructors."""
        return {
            "service": cls.provide_service,
            "client": cls.provide_client,
        }

    @classmethod
    def provide(cls, name: str) -> Any:
        """Construct the object registered under ``name``.

        Args:
            name: Provider name, ``"service"`` or ``"client"``.

        Returns:
            A newly constructed object.

        Raises:
            KeyError: If nothing is registered under that name.
        """
        providers = cls.providers()
        if name not in providers:
            raise KeyError(f"No provider named {name!r}")
        logger.debug("Providing %s", name)
        return providers[name]()

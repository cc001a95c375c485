"""
Host Interop Shim

Calls out to the environment hosting the form (a browser page, a desktop
shell, a test harness) for things the validation core cannot do itself, such
as prompting the user for text.

Two ways to reach the host:
- Functions registered in-process with register() (checked first)
- An HTTP bridge: POST {base_url}/invoke with
  {"identifier": "...", "args": [...]}, answered by {"result": ...}

The validation core never depends on results from here.
"""

import logging
from typing import Any, Callable, Dict

import requests

logger = logging.getLogger(__name__)


class HostInteropError(RuntimeError):
    """Raised when a host function cannot be invoked."""


class HostInterop:
    """
    Invokes named functions in the host environment.

    Example:
        host = HostInterop({"enabled": False})
        host.register("person_validation.prompt", lambda message: input(message))
        name = host.prompt("First name?")
    """

    DEFAULT_PROMPT_FUNCTION = "person_validation.prompt"

    def __init__(self, host_interop_config: Dict[str, Any]):
        """
        Initialize host interop.

        Args:
            host_interop_config: Host interop configuration dict:
                    - enabled: Whether the HTTP bridge is used
                    - base_url: URL of the host bridge
                    - prompt_function: Identifier prompt() invokes
                    - timeout_ms: Request timeout in milliseconds
        """
        self.config = host_interop_config
        self.enabled = self.config.get('enabled', False)
        self.base_url = self.config.get('base_url')
        self.prompt_function = self.config.get(
            'prompt_function', self.DEFAULT_PROMPT_FUNCTION
        )
        self.timeout_ms = self.config.get('timeout_ms', 5000)
        self._functions: Dict[str, Callable[..., Any]] = {}

        if self.enabled:
            if not self.base_url:
                raise ValueError("host_interop.base_url is required when enabled")
            logger.info(
                "Host interop bridge initialized",
                extra={'base_url': self.base_url, 'timeout_ms': self.timeout_ms}
            )
        else:
            logger.info("Host interop bridge disabled (registered functions only)")

    def register(self, identifier: str, func: Callable[..., Any]) -> None:
        """Register an in-process host function under identifier."""
        self._functions[identifier] = func

    def unregister(self, identifier: str) -> None:
        self._functions.pop(identifier, None)

    def invoke(self, identifier: str, *args) -> Any:
        """
        Invoke a host function by identifier.

        Raises:
            HostInteropError: If nothing handles identifier, or the bridge fails
        """
        func = self._functions.get(identifier)
        if func is not None:
            logger.debug(f"Invoking registered host function {identifier}")
            return func(*args)

        if not self.enabled:
            raise HostInteropError(
                f"No host function registered for '{identifier}' "
                f"and the host bridge is disabled"
            )

        endpoint = f"{self.base_url.rstrip('/')}/invoke"
        payload = {'identifier': identifier, 'args': list(args)}
        logger.debug(f"Invoking host function {identifier} via {endpoint}")

        try:
            response = requests.post(
                endpoint,
                json=payload,
                timeout=self.timeout_ms / 1000.0
            )
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            logger.error("Host bridge timeout",
                         extra={'identifier': identifier, 'timeout_ms': self.timeout_ms})
            raise HostInteropError(
                f"Host function '{identifier}' timed out after {self.timeout_ms}ms"
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error("Host bridge error",
                         extra={'identifier': identifier, 'error': str(e)})
            raise HostInteropError(f"Host function '{identifier}' failed: {e}") from e

        # requests' JSONDecodeError is both a ValueError and a RequestException
        try:
            body = response.json()
        except ValueError as e:
            logger.error("Host bridge returned invalid JSON",
                         extra={'identifier': identifier})
            raise HostInteropError(
                f"Host function '{identifier}' returned invalid JSON: {e}"
            ) from e

        if not isinstance(body, dict) or 'result' not in body:
            raise HostInteropError(
                f"Host function '{identifier}' response has no 'result': {body!r}"
            )
        return body['result']

    def prompt(self, message: str) -> str:
        """Show message in the host and return the text entered."""
        result = self.invoke(self.prompt_function, message)
        return "" if result is None else str(result)

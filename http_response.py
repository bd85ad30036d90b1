import logging
from types import MappingProxyType
from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from utilities import get_status_text, render_response

LOGGER = logging.getLogger('http_response')

HTTP_VERSION = 'HTTP/1.1'

DEFAULT_HEADERS = {'Content-Type': 'text/html'}

@runtime_checkable
class SocketSink(Protocol):
    def sendall(self, data: bytes, /) -> None: ...

class Sink(Protocol):
    """Anything that accepts a byte string and may fail with OSError"""
    def write(self, data: bytes, /) -> object: ...

@dataclass(frozen=True)
class HttpResponse:
    """
    Immutable HTTP/1.1 response
    Status text is resolved from the status code and Content-Length is computed from the body on render
    """
    status_code: str = '200'
    headers: Mapping[str, str] | None = field(default=None, hash=False) # mappingproxy is unhashable
    body: str | None = None
    version: str = field(default=HTTP_VERSION, init=False)
    status_text: str = field(init=False)

    def __post_init__(self) -> None:
        headers = DEFAULT_HEADERS if self.headers is None else self.headers
        # Copy so later changes to the caller's dict never leak into the response
        object.__setattr__(self, 'headers', MappingProxyType(dict(headers)))
        object.__setattr__(self, 'status_text', get_status_text(self.status_code))

    @classmethod
    def new(cls, status_code: str, headers: Mapping[str, str] | None = None, body: str | None = None) -> 'HttpResponse':
        return cls(status_code, headers, body)

    @classmethod
    def default(cls) -> 'HttpResponse':
        """200 OK with no headers and no body"""
        return cls('200', {}, None)

    @property
    def body_text(self) -> str:
        return self.body if self.body is not None else ''

    @property
    def status_line(self) -> str:
        return f'{self.version} {self.status_code} {self.status_text}'

    def render(self) -> str:
        """Complete message: status line, headers, Content-Length, blank line and body"""
        return render_response(self.status_line, self.headers, self.body)

    def __str__(self) -> str:
        return self.render()

    def __bytes__(self) -> bytes:
        return self.render().encode('utf-8')

    def send(self, sink: Sink | SocketSink) -> None:
        """
        Writes the rendered response to sink in a single call
        OSError raised by the sink is logged and propagated unchanged, flushing and closing are left to the caller
        """
        message = bytes(self)
        try:
            if isinstance(sink, SocketSink):
                sink.sendall(message)
            else:
                sink.write(message)
        except OSError as e:
            LOGGER.warning(f'Failed to send {self.status_line!r}: {e}')
            raise
        LOGGER.debug(f'Sent {self.status_line!r} ({len(message)} bytes)')

def ok(body: str | None = None, headers: Mapping[str, str] | None = None) -> HttpResponse: return HttpResponse('200', headers, body)

def bad_request(body: str | None = None, headers: Mapping[str, str] | None = None) -> HttpResponse: return HttpResponse('400', headers, body)

def not_found(body: str | None = None, headers: Mapping[str, str] | None = None) -> HttpResponse: return HttpResponse('404', headers, body)

def internal_server_error(body: str | None = None, headers: Mapping[str, str] | None = None) -> HttpResponse: return HttpResponse('500', headers, body)

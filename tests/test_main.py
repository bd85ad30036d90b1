import logging

import pytest

from main import main, parse_header

def test_default_response(capsysbinary):
    assert main([]) == 0
    assert capsysbinary.readouterr().out == b"HTTP/1.1 200 OK\r\nContent-Type: text/html\r\nContent-Length: 0\r\n\r\n"

def test_status_and_body(capsysbinary):
    assert main(['-s', '404', '-b', 'missing']) == 0
    assert capsysbinary.readouterr().out == b"HTTP/1.1 404 Not Found\r\nContent-Type: text/html\r\nContent-Length: 7\r\n\r\nmissing"

def test_custom_headers(capsysbinary):
    assert main(['-H', 'Content-Type: application/json', '-H', 'Cache-Control: no-cache', '-b', '{}']) == 0
    out = capsysbinary.readouterr().out
    assert b'Content-Type: application/json\r\n' in out
    assert b'Cache-Control: no-cache\r\n' in out
    assert b'text/html' not in out
    assert out.endswith(b'Content-Length: 2\r\n\r\n{}')

def test_parse_header():
    assert parse_header('X-Test:  value ') == ('X-Test', 'value')

def test_malformed_header_exits():
    with pytest.raises(SystemExit) as excinfo:
        main(['-H', 'no separator'])
    assert excinfo.value.code == 2

def test_repeated_runs_keep_one_handler(capsysbinary):
    logger = logging.getLogger('http_response')
    main([])
    handler_count = len(logger.handlers)
    main([])
    main(['-v'])
    assert len(logger.handlers) == handler_count
    capsysbinary.readouterr()

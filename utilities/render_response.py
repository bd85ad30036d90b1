from collections.abc import Mapping

def render_response(status_line: str, response_headers: Mapping[str, str], body: str | None) -> str:
    res = f'{status_line}\r\n'

    for header, value in response_headers.items():
        res += f'{header}: {value}\r\n'

    content_length = len(body.encode('utf-8')) if body else 0 # byte length, not character count
    res += f'Content-Length: {content_length}\r\n'

    res += '\r\n'

    if body:
        res += body

    return res

if __name__ == '__main__':
    sample_status_line = 'HTTP/1.1 200 OK'
    sample_response_headers = {
                            'Content-Type': 'application/json',
                            'Cache-Control': 'no-cache'
                            }
    sample_body = '{"ok":true}'
    print(render_response(sample_status_line, sample_response_headers, sample_body))

    print('------')

    sample_status_line = 'HTTP/1.1 404 Not Found'
    sample_response_headers = {'Content-Type': 'text/html'}
    print(render_response(sample_status_line, sample_response_headers, None))

    print('------')

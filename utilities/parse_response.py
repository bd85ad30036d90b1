HEADER_DELIMITER = b'\r\n\r\n'

def parse_response(message: bytes) -> tuple[str, dict[str, str], bytes]: # returns (status line, headers dict, body) in original casing
    head, _, body = message.partition(HEADER_DELIMITER)

    response_line_raw = head.split(b'\r\n')[0]
    response_headers_raw_list = head.split(b'\r\n')[1:]

    if len(response_line_raw.split(b' ', 2)) != 3: # version, code and text must all be present
        raise ValueError('Parse Error - Status Line')

    response_headers_raw_dict = {}

    for h in response_headers_raw_list:
        _header = h.split(b': ', 1)

        if len(_header) != 2:
            raise ValueError('Parse Error - Headers')

        response_headers_raw_dict[_header[0]] = _header[1]

    response_line_decoded = response_line_raw.decode('utf-8')

    response_headers_decoded = {key.decode('utf-8'): value.decode('utf-8') for key, value in response_headers_raw_dict.items()}

    return response_line_decoded, response_headers_decoded, body

if __name__ == '__main__': # quick test
    sample_response = (
        "HTTP/1.1 200 OK\r\n"
        "Content-Type: text/html\r\n"
        "Content-Length: 5\r\n"
        "\r\n"
        "hello"
    ).encode('utf-8')
    print(parse_response(sample_response))
    # returns ('HTTP/1.1 200 OK', {'Content-Type': 'text/html', 'Content-Length': '5'}, b'hello')

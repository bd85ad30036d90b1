STATUS_TEXT = {
    '200': 'OK',
    '400': 'Bad Request',
    '404': 'Not Found',
    '500': 'Internal Server Error',
}

def get_status_text(status_code: str) -> str:
    """Looks up the reason phrase for a status code, falling back to Not Found"""
    return STATUS_TEXT.get(status_code, 'Not Found')

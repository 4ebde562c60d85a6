from pydantic import BaseModel, HttpUrl, TypeAdapter, ValidationError, field_validator

MAX_URL_LENGTH = 2048

_http_url = TypeAdapter(HttpUrl)


# Request DTOs
class ShortenRequest(BaseModel):
    url: str

    @field_validator('url')
    @classmethod
    def validate_url(cls, v):
        # Keep the submitted string as-is (HttpUrl would normalize it) and only use
        # HttpUrl to check it is well-formed.
        url_str = v.strip()

        if not url_str:
            raise ValueError('URL must not be empty')

        if len(url_str) > MAX_URL_LENGTH:
            raise ValueError(f'URL must be less than {MAX_URL_LENGTH} characters')

        # Only allow http/https
        if not (url_str.startswith('http://') or url_str.startswith('https://')):
            raise ValueError('Only HTTP and HTTPS URLs are allowed')

        try:
            _http_url.validate_python(url_str)
        except ValidationError:
            raise ValueError('Invalid URL')

        return url_str

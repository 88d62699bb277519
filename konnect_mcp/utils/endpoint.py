from urllib.parse import quote


def resolve_url(base_url: str, endpoint: str, api_version: str = "/v2", alternate_prefix: str = "/v3") -> str:
    """Join `base_url` and `endpoint`, honouring the alternate API version.

    Endpoints under `alternate_prefix` are served from the host root, so the
    primary version segment is dropped from the base URL:
    `https://us.api.konghq.com/v2` + `/v3/apis` -> `https://us.api.konghq.com/v3/apis`.
    """
    if not endpoint.startswith("/"):
        endpoint = f"/{endpoint}"
    base_url = base_url.rstrip("/")

    path = endpoint.split("?", 1)[0]
    if path == alternate_prefix or path.startswith(f"{alternate_prefix}/"):
        if base_url.endswith(api_version):
            base_url = base_url[: -len(api_version)]

    return f"{base_url}{endpoint}"


def path_segment(value) -> str:
    """Percent-encode a caller-supplied id for use as a single path segment."""
    return quote(str(value), safe="")

from pricetag.app.schemas import Meta


def build_meta(latency_ms: int = 0, provider: str = "", model: str = "") -> Meta:
    return Meta(latency_ms=latency_ms, provider=provider, model=model)

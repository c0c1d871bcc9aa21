"""Price feed clients."""
from monitor.api.coingecko import CoinGeckoClient


def build_client(config=None):
    """Create the CoinGecko client from the `api` config section."""
    api_cfg = (config or {}).get("api", {})
    cg_cfg = api_cfg.get("coingecko", {})
    kwargs = {"timeout": api_cfg.get("timeout", 15)}
    if cg_cfg.get("base_url"):
        kwargs["base_url"] = cg_cfg["base_url"]
    return CoinGeckoClient(**kwargs)

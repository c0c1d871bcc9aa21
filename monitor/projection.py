"""Compound-growth glide path from the current price to the target."""
import logging

logger = logging.getLogger("btctarget.projection")


def _check_prices(current_price, target_price):
    if current_price <= 0:
        raise ValueError(f"current_price must be > 0, got {current_price}")
    if target_price <= 0:
        raise ValueError(f"target_price must be > 0, got {target_price}")


def growth_factor(current_price, target_price, periods):
    """Per-period multiplier that compounds current_price into target_price."""
    _check_prices(current_price, target_price)
    if periods <= 0:
        raise ValueError(f"periods must be > 0, got {periods}")
    return (target_price / current_price) ** (1 / periods)


def project_path(current_price, target_price, months_remaining):
    """Prices for the next `months_remaining` months at constant compound growth.

    Step i (1-based) is current_price * g**i, so the last step lands on the
    target. With no months left the path is the target alone.
    """
    _check_prices(current_price, target_price)
    if months_remaining < 0:
        raise ValueError(f"months_remaining must be >= 0, got {months_remaining}")
    if months_remaining == 0:
        return [float(target_price)]

    g = growth_factor(current_price, target_price, months_remaining)
    return [current_price * g ** i for i in range(1, months_remaining + 1)]


def required_growth_pct(current_price, target_price, periods):
    """Per-period growth (%) needed to reach the target. Never negative.

    0 when the target is already met or no periods remain.
    """
    if periods <= 0 or current_price >= target_price:
        return 0.0
    return (growth_factor(current_price, target_price, periods) - 1) * 100

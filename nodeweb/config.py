"""
Gateway Configuration
====================

Loads all environment variables for the node web gateway.

Environment variables can be set in a .env file in the project root.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from nodeweb.utils.slotting import SlotWindow, SscWindows

# Load environment variables from .env file
load_dotenv()

# ============================================================
# Gateway Build Info (for reproducible builds)
# ============================================================
BUILD_ID = os.getenv("BUILD_ID", "dev-local")
GITHUB_COMMIT = os.getenv("GITHUB_SHA", "unknown")

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _env_number(name: str, default, cast, errors: List[str]):
    """
    Read a numeric variable; unparsable values are recorded in errors and the
    default is returned.
    """
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        kind = "an integer" if cast is int else "a number"
        errors.append(f"{name} is not {kind}: {raw!r}")
        return default


@dataclass
class GatewayConfig:
    """
    Configuration for the node web gateway.

    All values have defaults and can be overridden via:
    1. Environment variables (GatewayConfig.from_env())
    2. Direct instantiation (for testing)
    """

    # =========================================================================
    # HTTP Server
    # =========================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8090
    ENABLE_SSC: bool = True  # Mount /ssc routes (toggle, secret, stage)
    REQUEST_LOGGING: bool = True  # Log method, path, status and latency per request
    LOG_LEVEL: str = "INFO"

    # =========================================================================
    # Slotting
    # =========================================================================
    # Default SSC windows derive from k: commitment [0,k), opening [2k,3k),
    # shares [4k,5k), epoch of 6k slots.
    SECURITY_PARAM_K: int = 2
    SLOT_DURATION_SECONDS: float = 15.0
    SYSTEM_START: float = 0.0  # Unix timestamp of slot 0 of epoch 0

    # Explicit "start:end" overrides (all three or none)
    SSC_COMMITMENT: Optional[str] = None
    SSC_OPENING: Optional[str] = None
    SSC_SHARES: Optional[str] = None

    # =========================================================================
    # Node Identity
    # =========================================================================
    PUBLIC_KEY: str = field(default="00" * 32)
    PARTICIPATE_SSC: bool = True  # Initial value of the participation flag

    # Unparsable environment values, reported by validate_config()
    ENV_ERRORS: List[str] = field(default_factory=list, repr=False)

    @classmethod
    def from_env(cls) -> "GatewayConfig":
        """
        Load configuration from NODEWEB_* environment variables.

        Numeric values that do not parse fall back to their defaults and are
        listed in ENV_ERRORS, so validate_config() reports them with the rest.
        """
        errors: List[str] = []
        return cls(
            HOST=os.getenv("NODEWEB_HOST", "0.0.0.0"),
            PORT=_env_number("NODEWEB_PORT", 8090, int, errors),
            ENABLE_SSC=_env_bool("NODEWEB_ENABLE_SSC", True),
            REQUEST_LOGGING=_env_bool("NODEWEB_REQUEST_LOGGING", True),
            LOG_LEVEL=os.getenv("NODEWEB_LOG_LEVEL", "INFO").upper(),

            SECURITY_PARAM_K=_env_number("NODEWEB_SECURITY_PARAM_K", 2, int, errors),
            SLOT_DURATION_SECONDS=_env_number("NODEWEB_SLOT_DURATION_SECONDS", 15.0, float, errors),
            SYSTEM_START=_env_number("NODEWEB_SYSTEM_START", 0.0, float, errors),

            SSC_COMMITMENT=os.getenv("NODEWEB_SSC_COMMITMENT") or None,
            SSC_OPENING=os.getenv("NODEWEB_SSC_OPENING") or None,
            SSC_SHARES=os.getenv("NODEWEB_SSC_SHARES") or None,

            PUBLIC_KEY=os.getenv("NODEWEB_PUBLIC_KEY", "00" * 32),
            PARTICIPATE_SSC=_env_bool("NODEWEB_PARTICIPATE_SSC", True),

            ENV_ERRORS=errors,
        )

    def get_epoch_slots(self) -> int:
        """Slots per epoch (6k)."""
        return 6 * self.SECURITY_PARAM_K

    def get_ssc_windows(self) -> SscWindows:
        """
        SSC windows from explicit overrides, or the k-derived defaults.

        Raises:
            ValueError: Overrides are partial, malformed or overlapping
        """
        overrides = (self.SSC_COMMITMENT, self.SSC_OPENING, self.SSC_SHARES)
        if not any(overrides):
            return SscWindows.for_security_param(self.SECURITY_PARAM_K)
        if not all(overrides):
            raise ValueError(
                "SSC window overrides must set commitment, opening and shares together"
            )
        return SscWindows(
            commitment=SlotWindow.parse(self.SSC_COMMITMENT),
            opening=SlotWindow.parse(self.SSC_OPENING),
            shares=SlotWindow.parse(self.SSC_SHARES),
            epoch_slots=self.get_epoch_slots(),
        )


# ============================================================
# Configuration Validation
# ============================================================

def validate_config(config: GatewayConfig) -> bool:
    """
    Validates gateway configuration.
    Called on application startup.

    Raises:
        ValueError: Listing every problem found
    """
    errors: List[str] = list(config.ENV_ERRORS)

    if not 0 < config.PORT < 65536:
        errors.append(f"NODEWEB_PORT out of range: {config.PORT}")
    if config.SECURITY_PARAM_K <= 0:
        errors.append(f"NODEWEB_SECURITY_PARAM_K must be positive: {config.SECURITY_PARAM_K}")
    if config.SLOT_DURATION_SECONDS <= 0:
        errors.append(f"NODEWEB_SLOT_DURATION_SECONDS must be positive: {config.SLOT_DURATION_SECONDS}")
    if not config.PUBLIC_KEY:
        errors.append("NODEWEB_PUBLIC_KEY is empty")

    if config.SECURITY_PARAM_K > 0:
        try:
            config.get_ssc_windows()
        except ValueError as e:
            errors.append(f"SSC windows: {e}")

    if errors:
        raise ValueError("Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors))

    return True


def print_config_summary(config: GatewayConfig):
    """
    Prints a summary of the configuration (for debugging).
    """
    windows = config.get_ssc_windows()
    print("=" * 60)
    print("Node Web Gateway Configuration Summary")
    print("=" * 60)
    print(f"Build ID: {BUILD_ID}")
    print(f"GitHub Commit: {GITHUB_COMMIT}")
    print(f"Listen: {config.HOST}:{config.PORT}")
    print(f"SSC API: {'Enabled' if config.ENABLE_SSC else 'Disabled (base API only)'}")
    print(f"Request logging: {'Enabled' if config.REQUEST_LOGGING else 'Disabled'}")
    print(f"Security parameter k: {config.SECURITY_PARAM_K} ({config.get_epoch_slots()} slots/epoch)")
    print(f"Slot duration: {config.SLOT_DURATION_SECONDS}s")
    print(f"SSC windows: commitment={windows.commitment} opening={windows.opening} shares={windows.shares}")
    print(f"Participate in SSC: {config.PARTICIPATE_SSC}")
    print("=" * 60)

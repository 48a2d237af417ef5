"""xwebpack runtime configuration and settings."""
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_TEMPLATE_REPOSITORY = "https://github.com/react-fast-cli/react-fast-template.git"
DEFAULT_YARN_REGISTRY_HOST = "registry.yarnpkg.com"


@dataclass
class XwebpackConfig:
    """Runtime configuration for scaffold runs.

    Attributes:
        template_repository: Git URL of the project template to clone
        yarn_registry_host: Host probed to decide whether yarn is online
        min_node_version: Lowest node version that does not trigger a warning
        log_file: Optional path for file logging (disabled when unset)
    """

    template_repository: str = DEFAULT_TEMPLATE_REPOSITORY
    yarn_registry_host: str = DEFAULT_YARN_REGISTRY_HOST
    min_node_version: str = "6.0.0"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "XwebpackConfig":
        """Create config from environment variables.

        Environment variables:
            XWEBPACK_TEMPLATE_REPOSITORY: Template repository URL
            XWEBPACK_YARN_REGISTRY_HOST: Registry host for the reachability probe
            XWEBPACK_MIN_NODE_VERSION: Minimum recommended node version
            XWEBPACK_LOG_FILE: Enable file logging to this path

        Returns:
            XwebpackConfig instance with values from environment or defaults
        """
        return cls(
            template_repository=os.getenv(
                "XWEBPACK_TEMPLATE_REPOSITORY", cls.template_repository
            ),
            yarn_registry_host=os.getenv(
                "XWEBPACK_YARN_REGISTRY_HOST", cls.yarn_registry_host
            ),
            min_node_version=os.getenv(
                "XWEBPACK_MIN_NODE_VERSION", cls.min_node_version
            ),
            log_file=os.getenv("XWEBPACK_LOG_FILE") or None,
        )


# Global config instance (can be overridden)
_config: Optional[XwebpackConfig] = None


def get_config() -> XwebpackConfig:
    """Get the global xwebpack configuration.

    Returns:
        XwebpackConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = XwebpackConfig.from_env()
    return _config


def set_config(config: Optional[XwebpackConfig]):
    """Set the global xwebpack configuration.

    Args:
        config: XwebpackConfig instance to use globally, or None to reset
    """
    global _config
    _config = config

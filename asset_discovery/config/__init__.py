"""
Configuration module for asset discovery.
Provides configuration loading and validation.
"""

from .config_loader import ConfigLoader, DiscoveryConfig, OutputConfig

__all__ = ['ConfigLoader', 'DiscoveryConfig', 'OutputConfig']

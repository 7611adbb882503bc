import pytest

from auth import get_auth_manager
from auth.local import LocalAuthManager


class TestGetAuthManager:
    """Tests for get_auth_manager."""

    def test_local_backend(self, test_config, services):
        """Test that the default backend is the local one."""
        manager = get_auth_manager(test_config, services)

        assert isinstance(manager, LocalAuthManager)
        assert manager.services is services

    def test_unknown_backend(self, test_config, services):
        """Test that an unknown backend name is rejected."""
        test_config.auth_backend = "carrier-pigeon"

        with pytest.raises(ValueError, match="Unknown auth backend: carrier-pigeon"):
            get_auth_manager(test_config, services)

"""Tests for binding resolved IPs to target group slots."""

import pytest

from models.common import ConfigurationError
from models.targets import IpTargetModel, bind_ip_targets


class TestBindIpTargets:
    """Test positional target binding."""

    def test_binds_in_resolution_order(self):
        targets = bind_ip_targets(['10.0.2.9', '10.0.1.5'], expected_count=2, port=443)

        assert targets == [
            IpTargetModel(id='10.0.2.9', port=443),
            IpTargetModel(id='10.0.1.5', port=443),
        ]

    def test_without_expected_count(self):
        targets = bind_ip_targets(['10.0.1.5'])

        assert [target.port for target in targets] == [443]

    def test_count_mismatch(self):
        with pytest.raises(ConfigurationError) as exc_info:
            bind_ip_targets(['10.0.1.5'], expected_count=2)

        assert str(exc_info.value) == 'Expected 2 target IPs, resolved 1'

    def test_zero_slots(self):
        assert bind_ip_targets([], expected_count=0) == []

    def test_duplicate_ip(self):
        with pytest.raises(ConfigurationError) as exc_info:
            bind_ip_targets(['10.0.1.5', '10.0.1.5'])

        assert 'Duplicate target IP 10.0.1.5' in str(exc_info.value)

    def test_invalid_ip(self):
        with pytest.raises(ConfigurationError):
            bind_ip_targets(['10.0.1'])

    @pytest.mark.parametrize('port', [0, 65536])
    def test_port_out_of_range(self, port):
        with pytest.raises(ConfigurationError):
            bind_ip_targets(['10.0.1.5'], port=port)

"""Shared fixtures for the asset_discovery tests."""

import subprocess

import pytest

from asset_discovery.utils.logger import LogLevel, set_log_level

OUI_SAMPLE = """\
OUI/MA-L                                                    Organization
company_id                                                  Organization
                                                            Address

28-6F-B9   (hex)\t\tNokia Shanghai Bell Co., Ltd.
286FB9     (base 16)\t\tNokia Shanghai Bell Co., Ltd.
\t\t\t\tNo.388 Ning Qiao Road,Jin Qiao Pudong Shanghai
\t\t\t\tShanghai     201206
\t\t\t\tCN

00-AA-BB   (hex)\t\tExample Networks Inc.
00AABB     (base 16)\t\tExample Networks Inc.

b8-27-eb   (hex)\t\tRaspberry Pi Foundation
B827EB     (base 16)\t\tRaspberry Pi Foundation
"""

LINUX_IP_NEIGH = """\
192.168.1.1 dev wlan0 lladdr 28:6f:b9:00:11:22 REACHABLE
192.168.1.5 dev wlan0  FAILED
192.168.1.20 dev wlan0 lladdr b8:27:eb:aa:bb:cc STALE
192.168.1.1 dev wlan0 lladdr 28:6f:b9:00:11:22 REACHABLE
"""

MACOS_ARP = """\
? (192.168.1.1) at 28:6f:b9:0:11:22 on en0 ifscope [ethernet]
? (192.168.1.7) at (incomplete) on en0 ifscope [ethernet]
printer.local (192.168.1.30) at 0:aa:bb:1:2:3 on en0 ifscope [ethernet]
"""

WINDOWS_ARP = """\

Interface: 192.168.1.5 --- 0x3
  Internet Address      Physical Address      Type
  192.168.1.1           28-6f-b9-00-11-22     dynamic
  192.168.1.255         ff-ff-ff-ff-ff-ff     static
"""


@pytest.fixture(autouse=True)
def reset_log_level():
    """Keep --verbose style level changes from leaking between tests."""
    yield
    set_log_level(LogLevel.INFO)


@pytest.fixture
def oui_file(tmp_path):
    """Small IEEE-style OUI database on disk."""
    path = tmp_path / "oui.txt"
    path.write_text(OUI_SAMPLE, encoding="utf-8")
    return path


@pytest.fixture
def fake_run(monkeypatch):
    """
    Replace subprocess.run with a recorder.

    Set ``fake_run.outputs`` to a mapping of program name to stdout, or to an
    exception instance to raise when that program is started.
    """

    class FakeRun:
        def __init__(self):
            self.calls = []
            self.outputs = {}
            self.returncode = 0

        def __call__(self, command, **kwargs):
            self.calls.append((list(command), kwargs))
            outcome = self.outputs.get(command[0])
            if outcome is None:
                raise FileNotFoundError(2, "No such file or directory", command[0])
            if isinstance(outcome, BaseException):
                raise outcome
            return subprocess.CompletedProcess(command, self.returncode, stdout=outcome, stderr="")

    recorder = FakeRun()
    monkeypatch.setattr(subprocess, "run", recorder)
    return recorder

"""
Tests for the GS308EP front-end class.
"""

import unittest
from unittest.mock import MagicMock

from gs308ep.auth.password import merge_hash
from gs308ep.auth.session import AuthState
from gs308ep.errors import TransportError
from gs308ep.network.transport import HttpResponse
from gs308ep.switch import GS308EP

LOGIN_PAGE = "<input type=hidden id=\"rand\" name=\"rand\" value='1735414426'>"
CONFIG_PAGE = "<input type=hidden name='hash' id='hash' value=\"feedface\">"
STATUS_PAGE = """
<span class="pull-right poe-power-mode"><span>Delivering Power</span></span>
<span class="powClassShow">ml003@4@</span>
<input type="hidden" class="port" value="1">
<input type="hidden" class="hidPortPwr" id="hidPortPwr" value="1">
<span class='hid-txt wid-full'>ml574</span><div><span>5.8</span></div>
<span class="pull-right poe-power-mode"><span>Searching</span></span>
<span class="powClassShow">Unknown</span>
<input type="hidden" class="port" value="3">
<input type="hidden" class="hidPortPwr" id="hidPortPwr" value="0">
<span class='hid-txt wid-full'>ml574</span><div><span>1.2</span></div>
"""


class FakeSwitch:
    """Minimal in-memory stand-in for the switch's CGI endpoints."""

    def __init__(self, sid="sid42", post_status=200):
        self.sid = sid
        self.post_status = post_status
        self.calls = []

    def send(self, method, path, body=None, cookie=None):
        self.calls.append((method, path, body, cookie))
        if path == "/login.cgi":
            if method == "GET":
                return HttpResponse(200, "", LOGIN_PAGE)
            if body == "password=" + merge_hash("password", "1735414426"):
                return HttpResponse(200, f"Set-Cookie: SID={self.sid}; path=/\r\n", "")
            return HttpResponse(200, "", "<html>login</html>")
        if cookie != self.sid:
            return HttpResponse(401, "", "")
        if path == "/PoEPortConfig.cgi":
            if method == "GET":
                return HttpResponse(200, "", CONFIG_PAGE)
            return HttpResponse(self.post_status, "", "SUCCESS")
        if path == "/getPoePortStatus.cgi":
            return HttpResponse(200, "", STATUS_PAGE)
        return HttpResponse(404, "", "")

    def close(self):
        pass


class TestLoginState(unittest.TestCase):
    def test_login_success(self):
        switch = GS308EP("192.168.0.239", "password", transport=FakeSwitch())
        self.assertFalse(switch.is_authenticated())
        self.assertTrue(switch.login())
        self.assertTrue(switch.is_authenticated())
        self.assertIs(switch.state, AuthState.AUTHENTICATED)
        self.assertEqual(switch.session.cookie_token, "sid42")

    def test_wrong_password(self):
        switch = GS308EP("192.168.0.239", "wrong", transport=FakeSwitch())
        self.assertFalse(switch.login())
        self.assertIs(switch.state, AuthState.UNAUTHENTICATED)
        self.assertIsNone(switch.session)

    def test_transport_failure_returns_false(self):
        transport = MagicMock()
        transport.send.side_effect = TransportError("timed out")
        switch = GS308EP("192.168.0.239", "password", transport=transport)
        self.assertFalse(switch.login())
        self.assertIs(switch.state, AuthState.UNAUTHENTICATED)

    def test_close_drops_session(self):
        transport = MagicMock(wraps=FakeSwitch())
        with GS308EP("192.168.0.239", "password", transport=transport) as switch:
            switch.login()
        self.assertFalse(switch.is_authenticated())
        transport.close.assert_called_once()


class TestPortControl(unittest.TestCase):
    def setUp(self):
        self.fake = FakeSwitch()
        self.switch = GS308EP("192.168.0.239", "password", transport=self.fake)
        self.switch.login()

    def test_turn_on(self):
        self.assertTrue(self.switch.turn_on_port(2))
        self.assertEqual(self.switch.last_response_code, 200)
        method, path, body, cookie = self.fake.calls[-1]
        self.assertEqual((method, path, cookie), ("POST", "/PoEPortConfig.cgi", "sid42"))
        self.assertIn("portID=1&ADMIN_MODE=1", body)
        self.assertTrue(body.endswith("hash=feedface"))

    def test_turn_off(self):
        self.assertTrue(self.switch.turn_off_port(8))
        self.assertIn("portID=7&ADMIN_MODE=0", self.fake.calls[-1][2])

    def test_invalid_port(self):
        before = len(self.fake.calls)
        self.assertFalse(self.switch.turn_on_port(9))
        self.assertEqual(len(self.fake.calls), before)

    def test_requires_login(self):
        switch = GS308EP("192.168.0.239", "password", transport=self.fake)
        before = len(self.fake.calls)
        self.assertFalse(switch.turn_on_port(1))
        self.assertEqual(len(self.fake.calls), before)

    def test_cycle(self):
        sleep = MagicMock()
        self.assertTrue(self.switch.cycle_port(4, 500, sleep=sleep))
        sleep.assert_called_once_with(0.5)

    def test_cycle_negative_delay_returns_false(self):
        before = len(self.fake.calls)
        self.assertFalse(self.switch.cycle_port(3, -100))
        posts = [c for c in self.fake.calls[before:] if c[0] == "POST"]
        self.assertEqual(posts, [])

    def test_cycle_failure_skips_on_step(self):
        self.fake.post_status = 500
        sleep = MagicMock()
        before = len(self.fake.calls)
        self.assertFalse(self.switch.cycle_port(4, sleep=sleep))
        sleep.assert_not_called()
        self.assertEqual(len(self.fake.calls) - before, 2)
        self.assertEqual(self.switch.last_response_code, 500)


class TestTelemetry(unittest.TestCase):
    def setUp(self):
        self.switch = GS308EP("192.168.0.239", "password", transport=FakeSwitch())
        self.switch.login()

    def test_port_status(self):
        self.assertTrue(self.switch.get_port_status(1))
        self.assertFalse(self.switch.get_port_status(3))

    def test_port_power(self):
        self.assertAlmostEqual(self.switch.get_port_power(1), 5.8)
        self.assertEqual(self.switch.get_port_power(5), -1.0)
        self.assertEqual(self.switch.get_port_power(0), -1.0)

    def test_total_power(self):
        self.assertAlmostEqual(self.switch.get_total_power(), 7.0)

    def test_all_stats(self):
        stats = self.switch.get_all_port_stats()
        self.assertEqual([s.port for s in stats], [1, 3])
        self.assertTrue(stats[0].enabled)
        self.assertEqual(stats[0].power_class, "Class 4")
        self.assertEqual(stats[1].status, "Searching")

    def test_unauthenticated_telemetry(self):
        switch = GS308EP("192.168.0.239", "password", transport=FakeSwitch())
        self.assertEqual(switch.get_total_power(), -1.0)
        self.assertEqual(switch.get_all_port_stats(), [])
        self.assertFalse(switch.get_port_status(1))


if __name__ == "__main__":
    unittest.main()

import unittest
from unittest import mock

from meditrack.models.user import UserIdentity
from meditrack.services.auth_bridge import AuthBridge

CLAIMS = {"uid": "doc-1", "name": "Dra. Cucatto", "email": "dra@example.com", "picture": None}


@mock.patch("meditrack.services.auth_bridge.auth")
class TestAuthBridge(unittest.TestCase):
    def test_sign_in_verifies_token_and_notifies(self, auth):
        auth.verify_id_token.return_value = CLAIMS
        bridge = AuthBridge()
        seen = []
        bridge.on_identity_changed(seen.append)

        identity = bridge.sign_in("token-123")

        auth.verify_id_token.assert_called_once_with("token-123", check_revoked=True)
        self.assertEqual(identity.id, "doc-1")
        self.assertEqual(bridge.get_current_identity(), identity)
        self.assertEqual(seen, [identity])

    def test_invalid_token_leaves_state_untouched(self, auth):
        auth.verify_id_token.side_effect = ValueError("bad token")
        bridge = AuthBridge()
        seen = []
        bridge.on_identity_changed(seen.append)

        with self.assertRaises(ValueError):
            bridge.sign_in("nope")
        self.assertIsNone(bridge.get_current_identity())
        self.assertEqual(seen, [])

    def test_sign_out_revokes_and_clears(self, auth):
        bridge = AuthBridge(UserIdentity(id="doc-1"))
        seen = []
        bridge.on_identity_changed(seen.append)

        bridge.sign_out()

        auth.revoke_refresh_tokens.assert_called_once_with("doc-1")
        self.assertIsNone(bridge.get_current_identity())
        self.assertEqual(seen, [None])

    def test_sign_out_clears_even_if_revoke_fails(self, auth):
        auth.revoke_refresh_tokens.side_effect = RuntimeError("network")
        bridge = AuthBridge(UserIdentity(id="doc-1"))

        bridge.sign_out()
        self.assertIsNone(bridge.get_current_identity())

    def test_unsubscribe_stops_notifications(self, auth):
        auth.verify_id_token.return_value = CLAIMS
        bridge = AuthBridge()
        seen = []
        unsubscribe = bridge.on_identity_changed(seen.append)
        unsubscribe()

        bridge.sign_in("token-123")
        self.assertEqual(seen, [])

    def test_sign_out_without_identity_is_a_no_op(self, auth):
        AuthBridge().sign_out()
        auth.revoke_refresh_tokens.assert_not_called()


if __name__ == "__main__":
    unittest.main()

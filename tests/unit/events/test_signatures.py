from tokensync.domain.enums import TransferKind
from tokensync.events.signatures import (
    TRANSFER_BATCH_KEY,
    TRANSFER_KEY,
    TRANSFER_SINGLE_KEY,
    classify_event,
)


class TestClassifyEvent:
    def test_transfer(self):
        assert classify_event([TRANSFER_KEY]) == TransferKind.ERC721_TRANSFER

    def test_transfer_single(self):
        assert classify_event([TRANSFER_SINGLE_KEY]) == TransferKind.ERC1155_TRANSFER_SINGLE

    def test_transfer_batch(self):
        assert classify_event([TRANSFER_BATCH_KEY]) == TransferKind.ERC1155_TRANSFER_BATCH

    def test_known_hex_values(self):
        assert TRANSFER_KEY == int("0x99cd8bde557814842a3121e8ddfd433a539b8c9f14bf31ebf108d12e6196e9", 16)
        assert TRANSFER_SINGLE_KEY == int("0x182d859c0807ba9db63baf8b9d9fdbfeb885d820be6e206b9dab626d995c433", 16)
        assert TRANSFER_BATCH_KEY == int("0x2563683c757f3abe19c4b7237e2285d8993417ddffe0b54a19eb212ea574b08", 16)

    def test_unknown_key_is_unrecognized(self):
        assert classify_event([0x1234]) is None

    def test_empty_keys_is_unrecognized(self):
        assert classify_event([]) is None

    def test_only_first_key_is_considered(self):
        assert classify_event([0x1234, TRANSFER_KEY]) is None

    def test_extra_keys_after_match_are_ignored(self):
        assert classify_event([TRANSFER_SINGLE_KEY, 0x1, 0x2]) == TransferKind.ERC1155_TRANSFER_SINGLE

import pytest

from skeinhash import skein512
from skeinhash.core import IV160, IV256, IV384, IV512, Config, SkeinHash

MSG64 = (
    "FBD17C26B61A82E12E125F0D459B96C91AB4837DFF22B39B78439430CDFC5DC8"
    "78BB393A1A5F79BEF30995A85A12923339BA8AB7D8FC6DC5FEC6F4ED22C122BB"
)
MSG128 = MSG64 + (
    "E7EB61981892966DE5CEF576F71FC7A80D14DAB2D0C03940B95B9FB3A727C66A"
    "6E1FF0DC311B9AA21A3054484802154C1826C2A27A0914152AEB76F1168D4410"
)
KEY64 = (
    "CB41F1706CDE09651203C2D0EFBADDF847A0D315CB2E53FF8BAC41DA0002672E"
    "920244C66E02D5F0DAD3E94C42BB65F0D14157DECF4105EF5609D5B0984457C1"
)

VECTORS = [
    (64, None, "",
     "BC5B4C50925519C290CC634277AE3D6257212395CBA733BBAD37A4AF0FA06AF4"
     "1FCA7903D06564FEA7A2D3730DBDB80C1F85562DFCC070334EA4D1D9E72CBA7A"),
    (64, None, MSG64,
     "02D01535C2DF280FDE92146DF054B0609273C73056C93B94B82F5E7DCC5BE697"
     "9978C4BE24331CAA85D892D2E710C6C9B4904CD056A53547B866BEE097C0FB17"),
    (20, None, MSG128, "EF03079D61B57C6047E15FA2B35B46FA24279539"),
    (32, None, MSG128,
     "809DD3F763A11AF90912BBB92BC0D94361CBADAB10142992000C88B4CEB88648"),
    (48, None, MSG128,
     "825F5CBD5DA8807A7B4D3E7BD9CD089CA3A256BCC064CD73A9355BF3AE67F2BF"
     "93AC7074B3B19907A0665BA3A878B262"),
    (64, None, MSG128,
     "1A0D5ABF4432E7C612D658F8DCFA35B0D1AB68B8D6BD4DD115C23CC57B5C5BCD"
     "DE9BFF0ECE4208596E499F211BC07594D0CB6F3C12B0E110174B2A9B4B2CB6A9"),
    (128, None, MSG128,
     "8C25D314110D1C0D58054C96A19D571E26A45D5362AA8F47547E53E0BE4A830A"
     "5F2C29CCD88E2185FEBAD024A4696F2DBE8307DC150E7A58B3793B1A93FAE252"
     "3E2D239C59A23A1CC127B3C481A9809162E60B4CB01C011B9630322C8FE9745D"
     "56D0F3AED54B3490578DB4692901EAFC1960C15359176A9C0990B32B8CA8F94B"),
    (64, "", "D3090C72",
     "1259AFC2CB025EEF2F681E128F889BBCE57F9A502D57D1A17239A12E71603559"
     "16B72223790FD9A8B367EC96212A3ED239331ED72EF3DEB17685A8D5FD75158D"),
    (64, KEY64, "D3090C72167517F7C7AD82A70C2FD3F6",
     "478D7B6C0CC6E35D9EBBDEDF39128E5A36585DB6222891692D1747D401DE34CE"
     "3DB6FCBAB6C968B7F2620F4A844A2903B547775579993736D2493A75FF6752A1"),
]

SUMS = {
    20: skein512.sum160,
    32: skein512.sum256,
    48: skein512.sum384,
    64: skein512.sum512,
}


@pytest.mark.parametrize("hashsize, key_hex, msg_hex, expected_hex", VECTORS)
def test_vectors(hashsize, key_hex, msg_hex, expected_hex):
    config = None if key_hex is None else Config(key=bytes.fromhex(key_hex))
    msg = bytes.fromhex(msg_hex)
    expected = bytes.fromhex(expected_hex)

    h = skein512.new(hashsize, config)
    h.update(msg)
    assert h.digest() == expected
    assert skein512.digest(msg, hashsize, config) == expected

    key_bytes = bytes.fromhex(key_hex) if key_hex else None
    if hashsize in SUMS:
        assert SUMS[hashsize](msg, key_bytes) == expected


def _chunked_matches(h, config):
    pieces = bytes(64)
    joined = b""
    for i in range(64):
        h.update(pieces[:i])
        joined += pieces[:i]
    return h.digest() == skein512.digest(joined, h.digest_size, config)


@pytest.mark.parametrize(
    "make, config",
    [
        (lambda: skein512.new256(None), None),
        (lambda: skein512.new256(bytes(16)), Config(key=bytes(16))),
        (lambda: skein512.new512(None), None),
        (lambda: skein512.new512(bytes(16)), Config(key=bytes(16))),
        (lambda: skein512.new(128, None), None),
        (lambda: skein512.new(128, Config(key=bytes(16))), Config(key=bytes(16))),
    ],
)
def test_chunked_writes_match_one_shot(make, config):
    assert _chunked_matches(make(), config)


def test_block_size():
    assert skein512.new(64, None).block_size == 64


def test_sum_functions_match_keyed_digest():
    key_bytes = bytes(range(16))
    msg = bytes((i + key_bytes[i % 16]) & 0xFF for i in range(512))
    config = Config(key=key_bytes)
    for hashsize, func in SUMS.items():
        assert func(msg, key_bytes) == skein512.digest(msg, hashsize, config)


def test_invalid_hashsize_raises():
    with pytest.raises(ValueError):
        skein512.new(0, None)


def test_full_configuration_chunked():
    config = Config(
        key=bytes(16),
        key_id=bytes(16),
        personal=bytes(8),
        nonce=bytes(12),
        public_key=bytes(128),
    )
    assert _chunked_matches(skein512.new(64, config), config)


@pytest.mark.parametrize(
    "hashsize, iv", [(20, IV160), (32, IV256), (48, IV384), (64, IV512)]
)
def test_precomputed_chain_matches_configuration(hashsize, iv):
    assert skein512.Skein512(hashsize).chain == tuple(iv)
    assert SkeinHash(hashsize).chain == tuple(iv)


def test_reset_restores_fresh_state():
    h = skein512.new512()
    h.update(b"some data")
    h.reset()
    h.update(b"other")
    assert h.digest() == skein512.sum512(b"other")


def test_copy_is_independent():
    h = skein512.new256()
    h.update(b"abc")
    clone = h.copy()
    clone.update(b"def")
    assert h.digest() == skein512.sum256(b"abc")
    assert clone.digest() == skein512.sum256(b"abcdef")
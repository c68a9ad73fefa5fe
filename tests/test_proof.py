import hashlib

import pytest

from toyproof import G, Proof, Scalar, transcript_hash
from toyproof.hash import encode_item
from toyproof.word import from_le_bytes, to_le_bytes


def test_u64_proof_encoding():
    proof = Proof(commitment=0xC797C2406DB54D29, challenge=7, response=0)
    data = proof.to_bytes()
    assert len(data) == 24
    assert data[:8] == bytes.fromhex("294db56d40c297c7")
    assert Proof.from_u64_bytes(data) == proof


def test_from_u64_bytes_rejects_bad_length():
    with pytest.raises(ValueError):
        Proof.from_u64_bytes(b"\x00" * 23)


def test_digest_is_tagged_sha256():
    proof = Proof(1, 2, 3)
    tag = hashlib.sha256(b"toyproof/v1/transcript").digest()
    expected = hashlib.sha256(tag + tag + proof.to_bytes()).digest()
    assert proof.digest() == expected
    assert proof.digest() == transcript_hash(1, 2, 3)


def test_digest_distinguishes_transcripts():
    assert Proof(1, 2, 3).digest() != Proof(1, 3, 2).digest()


def test_curve_transcript_encoding():
    R = Scalar(3) * G
    proof = Proof(commitment=R, challenge=Scalar(5), response=Scalar(8))
    assert len(proof.to_bytes()) == 33 + 32 + 32
    assert len(proof.digest()) == 32


def test_encode_item_rejects_unknown_types():
    with pytest.raises(ValueError):
        encode_item(1.5)
    with pytest.raises(ValueError):
        encode_item(-1)


def test_word_helpers():
    assert to_le_bytes(59) == b"\x3b" + b"\x00" * 7
    assert from_le_bytes(to_le_bytes(59)) == 59
    with pytest.raises(ValueError):
        from_le_bytes(b"\x00" * 9)

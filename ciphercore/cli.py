#!/usr/bin/env python3
"""
Command-line access to ciphercore primitives.

Usage:
    ciphercore hash [-i FILE]
    ciphercore keygen
    ciphercore sign --key PRIVATE_HEX [-i FILE]
    ciphercore verify --key PUBLIC_HEX --signature SIG_HEX [-i FILE]
    ciphercore encrypt --key KEY_HEX --nonce NONCE_HEX [-i FILE] [-o FILE]
    ciphercore decrypt --key KEY_HEX --nonce NONCE_HEX [-i FILE] [-o FILE]
    ciphercore random LENGTH [--raw] [-o FILE]
    ciphercore compress [-i FILE] [-o FILE]
    ciphercore decompress [-i FILE] [-o FILE]
    ciphercore bench [--quick]

Exit codes: 0 success, 1 error, 2 signature mismatch.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .compression import compress, compression_ratio, decompress
from .config import configure_logging, get_config
from .crypto.aead import KEY_SIZE, NONCE_SIZE, decrypt, encrypt
from .crypto.hashing import sha256
from .crypto.rng import generate_random_bytes
from .crypto.signing import generate_keypair, sign, verify
from .crypto.utils import decode_fixed_hex
from .errors import CipherCoreError, InvalidKeyError, IOFailureError

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_MISMATCH = 2

logger = logging.getLogger(__name__)


def read_input(path: Optional[str]) -> bytes:
    """
    Read all bytes from a file, or stdin when path is None or '-'.

    Raises:
        IOFailureError: If the file cannot be read
    """
    try:
        if path is None or path == '-':
            return sys.stdin.buffer.read()
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise IOFailureError(f"Failed to read {path or 'stdin'}: {e}") from e


def write_output(path: Optional[str], data: bytes) -> None:
    """
    Write bytes to a file, or stdout when path is None or '-'.

    Raises:
        IOFailureError: If the file cannot be written
    """
    try:
        if path is None or path == '-':
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
            return
        with open(path, 'wb') as f:
            f.write(data)
    except OSError as e:
        raise IOFailureError(f"Failed to write {path or 'stdout'}: {e}") from e


def _write_line(path: Optional[str], text: str) -> None:
    write_output(path, (text + "\n").encode('ascii'))


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(prog='ciphercore',
                                     description='Cryptography and compression primitives')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Sub-commands')

    def with_io(sub: argparse.ArgumentParser, output: bool = True) -> argparse.ArgumentParser:
        sub.add_argument('-i', '--input', help='Input file (default: stdin)')
        if output:
            sub.add_argument('-o', '--output', help='Output file (default: stdout)')
        return sub

    with_io(subparsers.add_parser('hash', help='SHA-256 digest as hex'))
    subparsers.add_parser('keygen', help='Generate an Ed25519 key pair')

    sign_parser = with_io(subparsers.add_parser('sign', help='Sign input with Ed25519'))
    sign_parser.add_argument('--key', required=True, help='Private key (hex)')

    verify_parser = with_io(subparsers.add_parser('verify', help='Verify an Ed25519 signature'),
                            output=False)
    verify_parser.add_argument('--key', required=True, help='Public key (hex)')
    verify_parser.add_argument('--signature', required=True, help='Signature (hex)')

    for name, text in (('encrypt', 'Encrypt with AES-256-GCM'),
                       ('decrypt', 'Decrypt with AES-256-GCM')):
        aead_parser = with_io(subparsers.add_parser(name, help=text))
        aead_parser.add_argument('--key', required=True, help='32-byte key (hex)')
        aead_parser.add_argument('--nonce', required=True, help='12-byte nonce (hex)')

    random_parser = subparsers.add_parser('random', help='Secure random bytes')
    random_parser.add_argument('length', type=int, help='Number of bytes')
    random_parser.add_argument('--raw', action='store_true', help='Write raw bytes instead of hex')
    random_parser.add_argument('-o', '--output', help='Output file (default: stdout)')

    with_io(subparsers.add_parser('compress', help='Compress with zstd'))
    with_io(subparsers.add_parser('decompress', help='Decompress a zstd frame'))

    bench_parser = subparsers.add_parser('bench', help='Benchmark the primitives')
    bench_parser.add_argument('--quick', action='store_true',
                              help='Run with reduced parameters for quick testing')

    return parser


def run_command(args: argparse.Namespace) -> int:
    """
    Execute a parsed command.

    Returns:
        Process exit code

    Raises:
        CipherCoreError: If the underlying primitive fails
    """
    if args.command == 'hash':
        _write_line(args.output, sha256(read_input(args.input)).hex())

    elif args.command == 'keygen':
        pair = generate_keypair()
        print(json.dumps({'publicKey': pair.public_key, 'privateKey': pair.private_key}))

    elif args.command == 'sign':
        _write_line(args.output, sign(args.key, read_input(args.input)))

    elif args.command == 'verify':
        if not verify(args.key, args.signature, read_input(args.input)):
            logger.warning("Signature does not match")
            return EXIT_MISMATCH
        logger.info("Signature valid")

    elif args.command in ('encrypt', 'decrypt'):
        key = decode_fixed_hex(args.key, KEY_SIZE, InvalidKeyError, "AES-256 key")
        nonce = decode_fixed_hex(args.nonce, NONCE_SIZE, InvalidKeyError, "AES-GCM nonce")
        operation = encrypt if args.command == 'encrypt' else decrypt
        write_output(args.output, operation(key, nonce, read_input(args.input)))

    elif args.command == 'random':
        data = generate_random_bytes(args.length)
        if args.raw:
            write_output(args.output, data)
        else:
            _write_line(args.output, data.hex())

    elif args.command == 'compress':
        data = read_input(args.input)
        blob = compress(data)
        logger.info("Compressed %d -> %d bytes (ratio %.2f)",
                    len(data), len(blob), compression_ratio(len(data), len(blob)))
        write_output(args.output, blob)

    elif args.command == 'decompress':
        write_output(args.output, decompress(read_input(args.input)))

    elif args.command == 'bench':
        from .evaluation.benchmark import run_comprehensive_benchmark
        print(json.dumps(run_comprehensive_benchmark(quick=args.quick), indent=2))

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the ciphercore command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    try:
        configure_logging('DEBUG' if args.verbose else get_config().log_level)
        return run_command(args)
    except CipherCoreError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())

"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that asks interactively for whatever
the command line left out, or falls back to defaults in non-interactive mode. Key pairs are written as key files,
ciphertext as a single line of space-separated integers.

Typical usage example:

    asciirsa
    OR
    python -m asciirsa keygen --prime-source random -n
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import pathlib
import sys
import typing

import asciirsa
from asciirsa import keygen as kg
from asciirsa import rsa


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in ASCII RSA.",
            choices=["keygen", "encrypt", "decrypt"],
        ),
    "keygen":
        HelpData("Key pair generation utility."),
    "encrypt":
        HelpData("Encryption utility."),
    "decrypt":
        HelpData("Decryption utility."),
    "public_key":
        HelpData(
            description="Location of the public key file.",
            format=pathlib.Path,
            default=pathlib.Path("public_key.txt"),
        ),
    "private_key":
        HelpData(
            description="Location of the private key file.",
            format=pathlib.Path,
            default=pathlib.Path("private_key.txt"),
        ),
    "prime_source":
        HelpData(
            description="Where the two primes come from.",
            choices=["manual", "random"],
            default="random",
        ),
    "manual":
        HelpData("Input both prime numbers yourself."),
    "random":
        HelpData("Generate both prime numbers randomly."),
    "prime_p":
        HelpData(
            description="The first prime number.",
            format=int,
        ),
    "prime_q":
        HelpData(
            description="The second prime number (must be different from the first).",
            format=int,
        ),
    "prime_low":
        HelpData(
            description="Lower bound for random primes.",
            format=int,
            advanced=True,
            default=kg.PRIME_RANGE[0],
        ),
    "prime_high":
        HelpData(
            description="Upper bound for random primes.",
            format=int,
            advanced=True,
            default=kg.PRIME_RANGE[1],
        ),
    "key_format":
        HelpData(
            description="Key file format.",
            choices=list(rsa.KEY_FORMATS),
            advanced=True,
            default="plain",
        ),
    "message":
        HelpData(
            description="Text to encrypt or path to file containing it. If Path start with `P:`",
            format=str,
        ),
    "ciphertext":
        HelpData(
            description="Ciphertext to decrypt or path to file containing it. If Path start with `P:`",
            format=str,
            default="P:ciphertext.txt",
        ),
    "output":
        HelpData(
            description="Location of the ciphertext file to write.",
            format=pathlib.Path,
            default=pathlib.Path("ciphertext.txt"),
        ),
    "overwrite":
        HelpData(
            description="Overwrite specified destination files if they exist?",
            choices=["Y", "N"],
            default="N",
        )
}

needs = {
    "keygen": ("public_key", "private_key", "key_format", "prime_source"),
    "encrypt": ("public_key", "message", "output"),
    "decrypt": ("private_key", "ciphertext"),
}

pubkey = argparse.ArgumentParser(add_help=False)
pubkey.add_argument("--public_key", "-p", type=help_dict["public_key"].format, help=help_dict["public_key"].description)
privkey = argparse.ArgumentParser(add_help=False)
privkey.add_argument("--private_key",
                     "-P",
                     type=help_dict["private_key"].format,
                     help=help_dict["private_key"].description)
corep = argparse.ArgumentParser(prog="asciirsa")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {asciirsa.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

keygen = commands.add_parser("keygen", parents=[privkey, pubkey], help=help_dict["keygen"].description)
keygen.add_argument("--prime-source",
                    "-s",
                    choices=help_dict["prime_source"].choices,
                    help=help_dict["prime_source"].description)
keygen.add_argument("--prime-p", type=help_dict["prime_p"].format, help=help_dict["prime_p"].description)
keygen.add_argument("--prime-q", type=help_dict["prime_q"].format, help=help_dict["prime_q"].description)
keygen.add_argument("--prime-low", type=help_dict["prime_low"].format, help=help_dict["prime_low"].description)
keygen.add_argument("--prime-high", type=help_dict["prime_high"].format, help=help_dict["prime_high"].description)
keygen.add_argument("--key-format",
                    "-f",
                    choices=help_dict["key_format"].choices,
                    help=help_dict["key_format"].description)
keygen.add_argument("--overwrite", "-o", action="store_const", const="Y", help=help_dict["overwrite"].description)

encrypt = commands.add_parser("encrypt", parents=[pubkey], help=help_dict["encrypt"].description)
encrypt.add_argument("--message", "-m", type=help_dict["message"].format, help=help_dict["message"].description)
encrypt.add_argument("--output", "-O", type=help_dict["output"].format, help=help_dict["output"].description)
decrypt = commands.add_parser("decrypt", parents=[privkey], help=help_dict["decrypt"].description)
decrypt.add_argument("--ciphertext",
                     "-c",
                     type=help_dict["ciphertext"].format,
                     help=help_dict["ciphertext"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default is not None:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    choices = helper_data.choices
    vald = set(choices)
    for choice in choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def fill_args(args: argparse.Namespace, reqs: typing.Iterable[str], mode: tuple[bool, bool],
              prntr: typing.Callable = print) -> None:
    """Resolve every missing argument in `reqs`, by prompt or default."""
    for req in reqs:
        if getattr(args, req, None) is None:
            if help_dict[req].choices is not None:
                res = choice_handler(req, mode)
            else:
                res = input_handler(req, mode)
            setattr(args, req, res)
        else:
            prntr(f"{req}: {getattr(args, req)}")


def check_message(mess: str, enc: str) -> str:
    """Parse message for path-notice.

    Undecodable bytes become U+FFFD, which the core then rejects as unsupported or malformed input.
    """
    if mess.startswith("P:"):
        mess = mess[2:]
        with open(mess, "r", encoding=enc, errors="replace") as f:
            mess = f.read().rstrip("\r\n")
    return mess


def pick_key_pair(args: argparse.Namespace, mode: tuple[bool, bool], prntr: typing.Callable) -> kg.KeyPair:
    """Derive the key pair from manual or random primes, re-asking for manual primes until they are usable."""
    if args.prime_source == "random":
        fill_args(args, ("prime_low", "prime_high"), mode, prntr)
        p, q = kg.generate_primes(args.prime_low, args.prime_high)
        prntr(f"Generated Prime 1: {p}")
        prntr(f"Generated Prime 2: {q}")
        return kg.generate_key_pair(p, q)
    while True:
        fill_args(args, ("prime_p", "prime_q"), mode, prntr)
        try:
            return kg.generate_key_pair(args.prime_p, args.prime_q)
        except (asciirsa.NotPrimeError, asciirsa.DuplicatePrimesError, asciirsa.ModulusTooSmallError) as exc:
            if mode[0]:
                raise
            print(f"{exc} Try different values.")
            args.prime_p = args.prime_q = None


def run(args: argparse.Namespace, pstatus: tuple[bool, bool], pspr: typing.Callable) -> int:
    """Execute the resolved subcommand, returning the exit status."""
    match args.subcommand:
        case "keygen":
            if args.private_key.exists() or args.public_key.exists():
                rs = getattr(args, "overwrite", None)
                if rs is None:
                    rs = choice_handler("overwrite", pstatus, pspr)
                if rs == "N":
                    print("Destination private or public key already exists!")
                    return 1
            pspr("Note: textbook RSA with toy-sized primes is not secure.")
            rpk = rsa.RSAPrivKey.from_key_pair(pick_key_pair(args, pstatus, pspr))
            rpk.export(args.private_key, args.key_format)
            try:
                rpk.pub.export(args.public_key, args.key_format)
            except Exception:
                args.private_key.unlink(missing_ok=True)
                raise
            pspr(f"Public Key: ({rpk.pub.mod}, {rpk.pub.expo})")
            pspr(f"Private Key: ({rpk.mod}, {rpk.expo})")
            pspr("\nKey pair generated!")
        case "encrypt":
            args.message = check_message(args.message, "utf-8")
            rpu = rsa.RSAPubKey.import_key(args.public_key)
            ciph = rsa.format_ciphertext(rpu.encrypt(args.message))
            with open(args.output, "w", encoding="ascii") as f:
                f.write(ciph + "\n")
            pspr("Ciphertext:")
            print(ciph)
            pspr(f"Encryption completed. Ciphertext saved to '{args.output}'.")
        case "decrypt":
            args.ciphertext = check_message(args.ciphertext, "ascii")
            rpk = rsa.RSAPrivKey.import_key(args.private_key)
            clear = rpk.decrypt(args.ciphertext)
            pspr("Cleartext:")
            print(clear)
    return 0


def main(argv: list[str] | None = None) -> None:
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    pstatus = (args.non_interactive, args.advanced)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to ASCII RSA!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", pstatus)
    try:
        fill_args(args, needs[args.subcommand], pstatus, pspr)
        pspr("\nInput Complete! Executing...")
        status = run(args, pstatus, pspr)
    except (asciirsa.RSAError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    if status:
        sys.exit(status)
    pspr("Thank you for using ASCII RSA!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()

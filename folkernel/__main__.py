"""
CLI entry point. Run as: python -m folkernel --domain <name>
"""

import argparse

from .core.freevars import generalize
from .domains import DOMAINS
from .inference.equal import equalitize
from .render import print_formula
from .semantics import holds


def main():
    parser = argparse.ArgumentParser(description="First-order logic kernel examples")
    parser.add_argument(
        "--domain",
        choices=list(DOMAINS.keys()),
        default="mod_inverse",
        help="Which worked example to run",
    )
    parser.add_argument("--max-modulus", type=int, default=45,
                        help="Largest modulus to try for arithmetic domains")
    parser.add_argument("--quiet", action="store_true", help="Less output")
    args = parser.parse_args()

    domain = DOMAINS[args.domain]
    fm = domain["make_formula"]()

    print(f"Domain: {args.domain} -- {domain['description']}")
    print_formula(fm, "Formula")

    make_models = domain.get("make_models")
    if make_models:
        closed = generalize(fm)
        models = make_models(args.max_modulus)
        true_in = []
        for model in models:
            result = holds(model, {}, closed)
            if result:
                true_in.append(len(model.domain))
            if not args.quiet:
                print(f"  |D| = {len(model.domain):>3}  {model.name}: {result}")
        print(f"Holds for domain sizes: {true_in}")
        return

    result = equalitize(fm, verbose=not args.quiet)
    print(f"\n{'='*60}")
    print_formula(result, "Equalitized")
    print(f"{'='*60}")


if __name__ == "__main__":
    main()

import argparse
import logging
import sys

import numpy as np

from MunsellColor import MunsellSpace, BuildRenotationTable, LoadMunsellTable
from MunsellColor.Utils.ParserOptions import AddTableArgs, AddGamutArgs, AddStepArgs

parser = argparse.ArgumentParser(description='Munsell colour arithmetic and matching')
AddTableArgs(parser)
subparsers = parser.add_subparsers(dest='command', required=True)

for name in ['check', 'fix', 'hex']:
    sub = subparsers.add_parser(name)
    sub.add_argument('colors', nargs='+', help='Munsell colours, i.e. "5PB 2/4"')
    AddGamutArgs(sub)

for name in ['lighter', 'darker', 'saturate', 'desaturate']:
    sub = subparsers.add_parser(name)
    sub.add_argument('colors', nargs='+')
    AddStepArgs(sub)
    sub.add_argument('--strict', action='store_true')

for name in ['complement', 'rotate']:
    sub = subparsers.add_parser(name)
    sub.add_argument('colors', nargs='+')
    AddGamutArgs(sub)
    AddStepArgs(sub)

seq_parser = subparsers.add_parser('seq')
seq_parser.add_argument('start')
seq_parser.add_argument('end')
seq_parser.add_argument('n', type=int)

nearest_parser = subparsers.add_parser('nearest', help='Nearest colour of sRGB hex codes or LUV triples')
nearest_parser.add_argument('--hex', nargs='+', default=[])
nearest_parser.add_argument('--luv', nargs=3, type=float, action='append', default=[])

args = parser.parse_args()
if args.verbose:
    logging.basicConfig(level=logging.DEBUG)

if args.table is not None:
    table = LoadMunsellTable(args.table)
else:
    table = BuildRenotationTable(args.dataset, not args.include_undisplayable, args.verbose)
space = MunsellSpace(table)

if args.command == 'seq':
    try:
        outputs = space.seq(args.start, args.end, args.n)
    except ValueError as e:  # MunsellError or n < 2
        print(e)
        sys.exit(1)
elif args.command == 'nearest':
    outputs = space.hex_to_munsell(args.hex) if args.hex else []
    if args.luv:
        outputs += space.nearest(np.array(args.luv))
elif args.command == 'hex':
    outputs = space.to_hex(args.colors, fix=args.fix, strict=args.strict)
elif args.command in ['check', 'fix']:
    outputs = space.in_gamut(args.colors, fix=args.fix or args.command == 'fix', strategy=args.strategy,
                             strict=args.strict)
elif args.command == 'complement':
    outputs = space.complement(args.colors, fix=args.fix, strategy=args.strategy, strict=args.strict)
elif args.command == 'rotate':
    outputs = space.rotate_hue(args.colors, args.steps, fix=args.fix, strategy=args.strategy, strict=args.strict)
else:
    outputs = getattr(space, args.command)(args.colors, args.steps, strict=args.strict)

for output in outputs:
    print(output)

sys.exit(0 if all(getattr(o, 'ok', o is not None) for o in outputs) else 1)

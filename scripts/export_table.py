import argparse

from MunsellColor.Utils.IO import BuildRenotationTable, SaveMunsellTable
from MunsellColor.Utils.ParserOptions import AddTableArgs

parser = argparse.ArgumentParser(description='Export the Munsell renotation reference table as CSV')
AddTableArgs(parser)
parser.add_argument('output', type=str, help='CSV file to write')
args = parser.parse_args()

table = BuildRenotationTable(args.dataset, not args.include_undisplayable, args.verbose)
SaveMunsellTable(table, args.output)
print(f"Wrote {len(table)} colours to {args.output}")

from .CustomTypes import FixStrategy
from .IO import RENOTATION_DATASETS


def AddTableArgs(parser):
    parser.add_argument('--table', type=str, required=False, default=None,
                        help='CSV file with the reference table (name,L,U,V). Defaults to the renotation data')
    parser.add_argument('--dataset', type=str, default='all', choices=list(RENOTATION_DATASETS),
                        help='Renotation dataset used when no table file is given')
    parser.add_argument('--include_undisplayable', action='store_true',
                        help='Keep renotation colours outside of the sRGB gamut in the table')
    parser.add_argument('--verbose', action='store_true', help='Verbose output')


def AddGamutArgs(parser):
    parser.add_argument('--fix', action='store_true', help='Correct colours that are not in the table')
    parser.add_argument('--strategy', type=lambda choice: FixStrategy(choice.lower()), choices=list(FixStrategy),
                        default=FixStrategy.NEAREST, help='How colours are corrected with --fix')
    parser.add_argument('--strict', action='store_true', help='Fail on the first batch with any bad colour')


def AddStepArgs(parser):
    parser.add_argument('--steps', type=int, default=1, help='Number of steps to move')

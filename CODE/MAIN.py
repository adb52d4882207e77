# main.py

import argparse
import logging
import os

import Utils
from MaxRectsPacker import MaxRectsPacker
from Plotter import PackingPlotter

log = logging.getLogger("maxrects")

BIN_WIDTH = 200
BIN_HEIGHT = 200

MIN_ITEM_SIDE = 1
MAX_ITEM_SIDE = 99

OUTPUT_FOLDER = "output"


def non_negative_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"could not parse '{value}' as an integer")
    if number < 0:
        raise argparse.ArgumentTypeError(f"'{value}' must not be negative")
    return number


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        prog="maxrects",
        description="Packs random boxes into bins and renders the result",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-b", "--boxes", type=non_negative_int, default=None,
                        metavar="NUMBER", help="Sets the number of random boxes to place")
    parser.add_argument("-n", "--bins", type=non_negative_int, required=True,
                        metavar="NUMBER", help="Sets the number of bins to pack")
    parser.add_argument("--seed", type=non_negative_int, default=None,
                        help="Seed for the random box sizes")
    source.add_argument("--csv", default=None, metavar="PATH",
                        help="Read boxes (columns W, H[, ITEM, CANTIDAD]) instead of generating them")
    parser.add_argument("--output-folder", default=OUTPUT_FOLDER,
                        help="Where placements.csv and the plots are written")
    parser.add_argument("--no-plot", action="store_true",
                        help="Skip rendering the plots")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log every placement")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] %(name)s %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # 1) Containers and boxes
    bins = Utils.build_containers(args.bins, BIN_WIDTH, BIN_HEIGHT)
    if args.csv:
        boxes = Utils.load_items_from_csv(args.csv)
    else:
        boxes = Utils.generate_random_items(args.boxes, MIN_ITEM_SIDE, MAX_ITEM_SIDE,
                                            seed=args.seed)
    log.info("Packing %d boxes into %d bins of %dx%d",
             len(boxes), len(bins), BIN_WIDTH, BIN_HEIGHT)

    # 2) Pack. The packer consumes its own copies of the lists.
    problem = MaxRectsPacker(boxes, bins)
    result = problem.place()

    print(f"Placed: {list(result.placed)}")
    print(f"Missed: {list(result.unplaced)}")
    print(f"Remaining Bins: {list(result.free_rects)}")
    percentage_packed = Utils.packed_percentage(result.placed, bins)
    print(f"Percentage Packed: {percentage_packed:.2f}%")

    # 3) Save placements
    if not os.path.exists(args.output_folder):
        os.makedirs(args.output_folder)
    output_csv = os.path.join(args.output_folder, "placements.csv")
    Utils.placements_dataframe(result.placed).to_csv(output_csv, index=False)
    log.info("Saved placements to: %s", output_csv)

    # 4) Plot
    if not args.no_plot:
        plotter = PackingPlotter()
        plotter.plot_all_containers(result.placed, bins, args.output_folder, seed=args.seed)

    return result


if __name__ == "__main__":
    main()

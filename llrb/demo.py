import argparse
import logging
import random

from .rbtree import OrderedTree

logger = logging.getLogger(__name__)


def demo(count: int = 10, seed=None, low: int = 0, high: int = 100) -> OrderedTree:
    rng = random.Random(seed)
    tree = OrderedTree()

    order = [rng.randrange(1000) for _ in range(count)]
    for key in order:
        tree.insert(key)
    logger.info("insertion order: %s", " ".join(map(str, order)))

    logger.info("size: %d", tree.size())
    logger.info("is_empty: %s", tree.is_empty())
    logger.info("height: %d", tree.height())
    if not tree.is_empty():
        logger.info("min: %r", tree.min())
        logger.info("max: %r", tree.max())
    logger.info("keys: %s", tree.keys())
    logger.info("keys in range [%d...%d]: %s", low, high, tree.keys_in_range(low, high))

    if not tree.is_empty():
        tree.delete_max()
    if not tree.is_empty():
        tree.delete_min()
    logger.info("after removing max and min: %s", tree.keys())
    return tree


def main(argv=None):
    parser = argparse.ArgumentParser(description="Exercise an OrderedTree with random keys")
    parser.add_argument("-n", "--count", type=int, default=10, help="number of random keys to insert")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    parser.add_argument("--low", type=int, default=0, help="lower bound of the range query")
    parser.add_argument("--high", type=int, default=100, help="upper bound of the range query")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every tree mutation")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(name)s: %(message)s",
    )
    demo(args.count, args.seed, args.low, args.high)


if __name__ == "__main__":
    main()

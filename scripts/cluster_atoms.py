# scripts/cluster_atoms.py
"""
Script for hierarchical K-means clustering of the atoms in an xyz file.

Atoms are first grouped into small clusters (half as many clusters as
atoms by default). When that produces more than ten clusters, the clusters
themselves are clustered again into a few meta-clusters.

Example usage:
    python scripts/cluster_atoms.py path/to/molecule.xyz --seed 42 --plot output/clusters.png
"""

import argparse
import sys
from typing import List, Optional, Sequence

from spatialclust.core.clusterable import wrap_all
from spatialclust.core.models.spatial import Atom, Cluster
from spatialclust.core.services.clustering import KMeans
from spatialclust.data.loaders import load_atoms
from spatialclust.utils.constants import (
    DEFAULT_META_CLUSTERS,
    DEFAULT_SEED,
    META_CLUSTER_THRESHOLD,
)
from spatialclust.utils.logging import setup_logging, get_logger

logger = get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Cluster the atoms of a molecule with hierarchical K-means",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("xyz_file", type=str, help="Path to the .xyz file")
    parser.add_argument(
        "--seed", type=int, default=DEFAULT_SEED, help="Random seed for K-means"
    )
    parser.add_argument(
        "--clusters",
        type=int,
        default=None,
        help="Number of small clusters (default: half the number of atoms)",
    )
    parser.add_argument(
        "--meta-clusters",
        type=int,
        default=DEFAULT_META_CLUSTERS,
        help="Number of clusters to group the small clusters into",
    )
    parser.add_argument(
        "--plot", type=str, default=None, help="Path to save a 3D plot of the clusters"
    )
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    parser.add_argument("--log-file", type=str, default=None, help="Log file path")
    return parser.parse_args(argv)


def report_clusters(clusters: List[Cluster]) -> None:
    """Log the atoms of each cluster."""
    for n, cluster in enumerate(clusters, start=1):
        logger.info(f"Cluster {n} has {len(cluster.flatten())} atoms:")
        for atom in cluster.flatten():
            logger.info(f"\t{atom}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the hierarchical clustering."""
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        atoms = load_atoms(args.xyz_file)
        if not atoms:
            logger.error(f"No atoms found in {args.xyz_file}")
            return 1
        logger.info(f"Number of atoms: {len(atoms)}")

        n_small_clusters = args.clusters or max(len(atoms) // 2, 1)
        small_clusters = KMeans(n_small_clusters, args.seed)(wrap_all(atoms, Atom))
        report_clusters(small_clusters)
        final_clusters = small_clusters

        if len(small_clusters) > META_CLUSTER_THRESHOLD:
            logger.info("Clustering the small clusters")
            meta_clusters = wrap_all(small_clusters, Atom)
            final_clusters = KMeans(args.meta_clusters, args.seed)(meta_clusters)
            report_clusters(final_clusters)

        if args.plot:
            from spatialclust.utils.visualization import plot_clusters_3d

            plot_clusters_3d(
                final_clusters,
                title=f"{len(final_clusters)} clusters of {len(atoms)} atoms",
                output_path=args.plot,
            )

    except Exception as e:
        logger.error(f"Error clustering {args.xyz_file}: {str(e)}")
        logger.exception(e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

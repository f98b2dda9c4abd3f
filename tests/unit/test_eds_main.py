"""Tests for the configuration driven runner."""

from pathlib import Path

import numpy as np

from eds_sampling.eds_main import run


def test_run_from_config(tmp_path: Path, correlated_data: np.ndarray, varying_epsilon: np.ndarray) -> None:
    """The runner loads the CSVs, builds the EDS and writes every output."""
    np.savetxt(tmp_path / "traj.csv", correlated_data, fmt="%.18e", delimiter=",")
    np.savetxt(tmp_path / "traj_eps.csv", varying_epsilon, fmt="%.18e", delimiter=",")

    config = {
        'base_path': str(tmp_path),
        'data_file': 'traj.csv',
        'epsilon_file': 'traj_eps.csv',
        'visualize': True,
        'ddof': 1,
    }
    result = run(config)

    assert 1 <= result.size <= correlated_data.shape[0]
    for suffix in ("EDS.csv", "EDS_PCn.csv", "EDS_index.csv", "labels.csv", "EDS.png"):
        assert (tmp_path / f"traj_{suffix}").exists()

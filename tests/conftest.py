import itertools

import pytest

from gc_solver.config import Config, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the built-in defaults, not a config file on disk."""
    config = Config()
    set_config(config)
    yield config
    set_config(None)


def brute_force_sat(formula):
    """Truth-table oracle: True iff some total assignment satisfies every clause."""
    for bits in itertools.product((True, False), repeat=formula.num_vars):
        if all(any(bits[abs(lit) - 1] == (lit > 0) for lit in clause) for clause in formula.clauses):
            return True
    return False


@pytest.fixture
def oracle():
    return brute_force_sat


@pytest.fixture
def write_graph(tmp_path):
    def _write(text, name="graph.txt"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write

import pytest

from plonkcore.evaluation_domain import EvaluationDomain, compute_num_threads
from plonkcore.field import Fr


def test_evaluation_domain():
    domain = EvaluationDomain(256)
    assert domain.size == 256
    assert domain.log2_size == 8


def test_domain_roots():
    n = 256
    domain = EvaluationDomain(n)
    assert domain.root.pow(n) == Fr.one()


def test_evaluation_domain_roots():
    n = 16
    domain = EvaluationDomain(n)
    domain.compute_lookup_table()
    roots = domain.round_roots()[-1]
    inverse_roots = domain.inverse_round_roots()[-1]
    for i in range((n - 1) // 2):
        assert roots[i] * domain.root == roots[i + 1]
        assert inverse_roots[i] * domain.root_inverse == inverse_roots[i + 1]
        assert roots[i] * inverse_roots[i] == Fr.one()


def test_round_table_shapes():
    n = 32
    domain = EvaluationDomain(n)
    domain.compute_lookup_table()
    tables = domain.round_roots()
    assert [len(t) for t in tables] == [2 << i for i in range(domain.log2_size - 1)]
    assert len(domain.roots) == 2 * n
    for table in tables:
        assert table[0] == Fr.one()


def test_root_is_primitive():
    domain = EvaluationDomain(64)
    assert domain.root.pow(32) == Fr(-1)
    assert domain.root * domain.root_inverse == Fr.one()


def test_domain_inverse_and_constants():
    domain = EvaluationDomain(128)
    assert domain.domain == Fr(128)
    assert domain.domain * domain.domain_inverse == Fr.one()
    assert domain.generator * domain.generator_inverse == Fr.one()
    assert domain.four_inverse * Fr(4) == Fr.one()


def test_generator_size_defaults_to_size():
    assert EvaluationDomain(8).generator_size == 8
    assert EvaluationDomain(8, 32).generator_size == 32


def test_single_thread_partition():
    domain = EvaluationDomain(1024)
    assert domain.num_threads * domain.thread_size == domain.size
    assert compute_num_threads(2) == 1


@pytest.mark.parametrize("size", [0, 3, 12, 100])
def test_rejects_non_power_of_two(size):
    with pytest.raises(ValueError):
        EvaluationDomain(size)


def test_lookup_table_only_once():
    domain = EvaluationDomain(8)
    domain.compute_lookup_table()
    with pytest.raises(RuntimeError):
        domain.compute_lookup_table()


def test_lookup_table_needs_size_two():
    domain = EvaluationDomain(1)
    with pytest.raises(ValueError):
        domain.compute_lookup_table()
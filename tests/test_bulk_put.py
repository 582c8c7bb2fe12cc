"""Tests for the BulkPut function."""

import pytest

from bulk_put import BulkPut, BulkPutArgs, bulk_put, key_for
from errors import InvalidArgumentError, StoreWriteError
from functions import FunctionContext


def run(region, arguments):
    context = FunctionContext(arguments, region)
    BulkPut().execute(context)
    return context.result_sender


class TestBulkPutArgs:
    def test_truncates_fractional_count(self):
        assert BulkPutArgs.from_arguments(['x', 2.9]).count == 2

    def test_truncates_toward_zero(self):
        assert BulkPutArgs.from_arguments(['x', -1.5]).count == -1

    def test_keeps_value_untouched(self):
        value = {'nested': [1, 2]}
        assert BulkPutArgs.from_arguments([value, 1]).value is value

    def test_extra_arguments_ignored(self):
        assert BulkPutArgs.from_arguments(['x', 3, 'extra']) == BulkPutArgs('x', 3)

    @pytest.mark.parametrize('arguments', [None, [], ['x']])
    def test_missing_arguments(self, arguments):
        with pytest.raises(InvalidArgumentError):
            BulkPutArgs.from_arguments(arguments)

    @pytest.mark.parametrize('count', ['3', None, True, [3], float('nan'), float('inf')])
    def test_non_numeric_count(self, count):
        with pytest.raises(InvalidArgumentError):
            BulkPutArgs.from_arguments(['x', count])


class TestBulkPut:
    def test_key_format(self):
        assert key_for(0) == 'foo0'
        assert key_for(41) == 'foo41'

    def test_puts_count_keys(self, region):
        sender = run(region, ['x', 3])
        assert sorted(region.keys()) == ['foo0', 'foo1', 'foo2']
        assert all(region.get(k) == 'x' for k in region.keys())
        assert sender.results == [True]
        assert sender.done

    def test_forty_two_keys(self, region):
        run(region, [{'a': 1}, 42])
        assert region.size() == 42
        assert 'foo41' in region
        assert 'foo42' not in region
        assert 'foo01' not in region

    def test_zero_count_still_sends_result(self, region):
        sender = run(region, ['x', 0])
        assert region.size() == 0
        assert sender.results == [True]

    def test_negative_count_is_zero_iterations(self, region):
        sender = run(region, ['x', -4])
        assert region.size() == 0
        assert sender.results == [True]

    def test_fractional_count(self, region):
        run(region, ['x', 2.9])
        assert sorted(region.keys()) == ['foo0', 'foo1']

    def test_other_keys_untouched(self, region):
        region.put('bar', 'keep')
        run(region, ['x', 3])
        assert region.get('bar') == 'keep'
        assert region.size() == 4

    def test_reinvoke_overwrites(self, region):
        run(region, ['v', 3])
        run(region, ['w', 5])
        assert region.size() == 5
        assert [region.get(key_for(i)) for i in range(5)] == ['w'] * 5

    def test_puts_in_increasing_order(self, region):
        seen = []
        region.register_all_keys()
        region.on_put(lambda key, value: seen.append(key))
        run(region, ['x', 12])
        assert seen == [f'foo{i}' for i in range(12)]

    def test_missing_count_writes_nothing(self, region):
        context = FunctionContext(['x'], region)
        with pytest.raises(InvalidArgumentError):
            BulkPut().execute(context)
        assert region.size() == 0
        assert context.result_sender.results == []
        assert not context.result_sender.done

    @pytest.mark.parametrize('fail_index', [3, 4])
    def test_store_failure_aborts(self, failing_region_at, fail_index):
        failing_region = failing_region_at(key_for(fail_index))
        context = FunctionContext(['x', 10], failing_region)
        with pytest.raises(StoreWriteError):
            BulkPut().execute(context)
        written = [key_for(i) for i in range(fail_index)]
        assert sorted(failing_region.keys()) == sorted(written)
        assert failing_region.attempts == written + [key_for(fail_index)]
        assert context.result_sender.results == []
        assert not context.result_sender.done

    def test_bulk_put_returns_true(self, region):
        assert bulk_put(region, BulkPutArgs('x', 2)) is True

    def test_id_is_qualified_name(self):
        assert BulkPut().get_id() == 'bulk_put.BulkPut'

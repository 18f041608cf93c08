import json
import threading
from unittest.mock import patch

import pytest

from portfolio_api.domain.errors import StorageError
from portfolio_api.domain.models.portfolio import HistoryEntry, StockResult
from portfolio_api.infra.repositories.history_repository_impl import JsonFileHistoryRepository
from portfolio_api.utils.logger import logger


def make_entry(entry_id: int) -> HistoryEntry:
    return HistoryEntry(
        id=entry_id,
        stocks=[
            StockResult(symbol='AAPL', quantity=2, current_price='150.00', total_value='300.00'),
            StockResult(symbol='BAD', error='Invalid symbol or quantity'),
        ],
        total_portfolio_value='300.00',
        timestamp='2024-05-01T12:00:00.000Z',
    )


class TestLoad:

    def test_missing_file_is_empty(self, history_repository):
        assert history_repository.load() == []
        assert history_repository.read_all() == []

    @pytest.mark.parametrize('content', ['', 'not json', '{"a": 1}', '[{"id": "x"}]', '\xff\xfe'])
    def test_corrupt_file_is_empty(self, history_repository, history_file, content):
        history_file.write_bytes(content.encode('latin-1'))

        assert history_repository.load() == []

    def test_unreadable_path_raises_storage_error(self, tmp_path):
        directory = tmp_path / 'history.json'
        directory.mkdir()

        with pytest.raises(StorageError):
            JsonFileHistoryRepository(str(directory)).read_all()


class TestAppend:

    def test_creates_file_on_first_append(self, history_repository, history_file):
        assert not history_file.exists()

        history_repository.append(make_entry(1))

        assert history_file.exists()

    def test_newest_first(self, history_repository):
        for entry_id in (1, 2, 3):
            history_repository.append(make_entry(entry_id))

        assert [e.id for e in history_repository.load()] == [3, 2, 1]

    def test_capped_at_limit(self, history_repository):
        for entry_id in range(1, 52):
            history_repository.append(make_entry(entry_id))

        history = history_repository.load()
        assert len(history) == 50
        assert history[0].id == 51
        assert history[-1].id == 2

    def test_custom_limit(self, history_file):
        repository = JsonFileHistoryRepository(str(history_file), limit=3)
        for entry_id in range(10):
            repository.append(make_entry(entry_id))

        assert [e.id for e in repository.load()] == [9, 8, 7]

    def test_round_trip_is_field_identical(self, history_repository):
        entry = make_entry(1714564800000)

        history_repository.append(entry)

        assert history_repository.read_all() == [entry]

    def test_storage_format(self, history_repository, history_file):
        history_repository.append(make_entry(7))

        text = history_file.read_text(encoding='utf-8')
        assert text.startswith('[\n  {')
        data = json.loads(text)
        assert data == [{
            'stocks': [
                {'symbol': 'AAPL', 'quantity': 2, 'currentPrice': '150.00', 'totalValue': '300.00'},
                {'symbol': 'BAD', 'error': 'Invalid symbol or quantity'},
            ],
            'totalPortfolioValue': '300.00',
            'timestamp': '2024-05-01T12:00:00.000Z',
            'id': 7,
        }]

    def test_corrupt_file_is_replaced(self, history_repository, history_file):
        history_file.write_text('garbage', encoding='utf-8')

        history_repository.append(make_entry(1))

        assert [e.id for e in history_repository.load()] == [1]

    def test_write_failure_is_logged_not_raised(self, tmp_path):
        directory = tmp_path / 'history.json'
        directory.mkdir()
        logger.clear_logs()

        JsonFileHistoryRepository(str(directory)).append(make_entry(1))

        errors = logger.get_logs(level='ERROR')
        assert errors and 'Error saving history' in errors[0]['message']

    def test_concurrent_appends_keep_every_entry(self, history_file):
        workers = 20
        start = threading.Barrier(workers)

        def append(entry_id):
            # Each thread gets its own repository, as each request does
            repository = JsonFileHistoryRepository(str(history_file), limit=50)
            start.wait()
            repository.append(make_entry(entry_id))

        threads = [threading.Thread(target=append, args=(i,)) for i in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        history = JsonFileHistoryRepository(str(history_file)).load()
        assert len(history) == workers
        assert sorted(e.id for e in history) == list(range(workers))

    def test_failed_replace_leaves_no_temp_file(self, history_repository, history_file):
        history_repository.append(make_entry(1))

        with patch('portfolio_api.infra.repositories.history_repository_impl.os.replace',
                   side_effect=OSError('disk full')):
            history_repository.append(make_entry(2))

        assert not history_file.with_name(history_file.name + '.tmp').exists()
        assert [e.id for e in history_repository.load()] == [1]

"""
NavigationService and EventBus tests.
"""

from practice_review.config import Config
from practice_review.events.event_bus import EventBus
from practice_review.services.navigation_service import NavigationService


class TestNavigationService:
    """Test NavigationService.go_back()."""

    def test_go_back_defaults_to_practice_home(self, qapp):
        navigation = NavigationService()
        targets = []
        navigation.navigation_requested.connect(targets.append)

        navigation.go_back()

        assert targets == [Config.PRACTICE_HOME_ROUTE]
        assert navigation.history == [Config.PRACTICE_HOME_ROUTE]

    def test_history_is_bounded(self, qapp):
        navigation = NavigationService()
        for i in range(NavigationService.MAX_HISTORY + 5):
            navigation.go_back(f"/route/{i}")
        assert len(navigation.history) == NavigationService.MAX_HISTORY
        assert navigation.history[-1] == f"/route/{NavigationService.MAX_HISTORY + 4}"


class TestEventBus:
    """Test EventBus helpers."""

    def test_record_opened(self, qapp):
        bus = EventBus()
        opened = []
        bus.review_opened.connect(opened.append)
        bus.emit_record_opened('5')
        assert opened == ['5']
        assert bus.current_record_id == '5'

    def test_practice_requests(self, qapp):
        bus = EventBus()
        by_type = []
        all_requests = []
        bus.request_practice_by_type.connect(by_type.append)
        bus.request_practice_all.connect(lambda: all_requests.append(True))

        bus.emit_practice_by_type('grammar')
        bus.emit_practice_all()

        assert by_type == ['grammar']
        assert all_requests == [True]

    def test_error_key(self, qapp):
        bus = EventBus()
        keys = []
        bus.status_error_key.connect(keys.append)
        bus.emit_error_key('errorLogs.statusUpdateError')
        assert keys == ['errorLogs.statusUpdateError']

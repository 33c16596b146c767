import pytest

from platformecs.event import (
    Event,
    EventHandler,
    EventManager,
    MAX_EVENT_LOG_LENGTH,
    NoEventData,
    event_name,
)


def test_event_values_follow_declaration_order():
    assert Event(0) is Event.WindowIsOpen
    assert Event(len(Event) - 1) is Event.PlayerShootEvent
    assert event_name(0) == "WindowIsOpen"
    assert event_name(len(Event) - 1) == "PlayerShootEvent"


def test_event_name_of_named_event():
    assert event_name(Event.WindowIsOpen) == "WindowIsOpen"
    assert event_name(int(Event.PlayerShootEvent)) == "PlayerShootEvent"


def test_event_name_missing_for_unnamed_event():
    with pytest.raises(KeyError):
        event_name(Event.QuitEvent)


def test_handler_calls_callbacks_in_order():
    handler = EventHandler(Event.SendInput)
    received = []
    handler.subscribe(lambda data: received.append(("a", data)))
    handler.subscribe(lambda data: received.append(("b", data)))
    handler.publish(7)
    assert received == [("a", 7), ("b", 7)]


def test_publish_without_data_sends_no_event_data():
    manager = EventManager()
    received = []
    manager.add_handler(Event.QuitEvent).subscribe(received.append)
    manager.publish(Event.QuitEvent)
    assert received == [NoEventData()]


def test_subscribe_returns_the_callback():
    handler = EventHandler(Event.GetScore)
    received = []

    def on_score(data):
        received.append(data)

    returned = handler.subscribe(on_score)
    assert returned is on_score

    handler.publish(3)
    assert received == [3]


def test_callbacks_can_mutate_shared_state():
    manager = EventManager()
    state = {"open": True}

    def close(data):
        data["open"] = False

    manager.add_handler(Event.WindowIsOpen).subscribe(close)
    manager.publish(Event.WindowIsOpen, state)
    assert state == {"open": False}


def test_add_handler_twice_keeps_same_handler():
    manager = EventManager()
    first = manager.add_handler(Event.PollEvent)
    second = manager.add_handler(Event.PollEvent)
    assert first is second
    assert manager.get_handler(Event.PollEvent) is first


def test_missing_and_removed_handler_raise():
    manager = EventManager()
    with pytest.raises(KeyError):
        manager.get_handler(Event.GetEntity)
    manager.add_handler(Event.GetEntity)
    manager.remove_handler(Event.GetEntity)
    with pytest.raises(KeyError):
        manager.publish(Event.GetEntity, None)


def test_event_log_records_published_types():
    manager = EventManager()
    manager.add_handler(Event.PollEvent)
    manager.add_handler(Event.SendInput)
    manager.publish(Event.PollEvent)
    manager.publish(Event.SendInput)
    manager.publish(Event.PollEvent)
    assert manager.event_log == [Event.PollEvent, Event.SendInput, Event.PollEvent]


def test_event_log_is_cleared_when_full():
    manager = EventManager(max_log_length=3)
    manager.add_handler(Event.GetScore)
    for _ in range(4):
        manager.publish(Event.GetScore)
    assert manager.event_log == [Event.GetScore]


def test_default_log_limit():
    assert MAX_EVENT_LOG_LENGTH == 100000
    manager = EventManager()
    manager.add_handler(Event.GetScore)
    manager.add_handler(Event.SendInput)
    for _ in range(MAX_EVENT_LOG_LENGTH):
        manager.publish(Event.GetScore)
    assert len(manager.event_log) == MAX_EVENT_LOG_LENGTH
    manager.publish(Event.SendInput)
    assert manager.event_log == [Event.SendInput]
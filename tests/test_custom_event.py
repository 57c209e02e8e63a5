from vroom.custom_event import CustomEvent
from vroom.event import Event, EventType


def test_add_callback_and_trigger_it():
    instance = CustomEvent()
    seen = []
    instance.add_callback(seen.append)
    key_pressed = Event(type=EventType.KEY_PRESSED)
    key_released = Event(type=EventType.KEY_RELEASED)

    for _ in range(1000):
        instance.trigger(key_pressed)
    for _ in range(2000):
        instance.trigger(key_released)

    types = [e.type for e in seen]
    assert types.count(EventType.KEY_PRESSED) == 1000
    assert types.count(EventType.KEY_RELEASED) == 2000


def test_callback_receives_same_event():
    instance = CustomEvent()
    received = []
    instance.add_callback(received.append)
    e = Event(type=EventType.EXIT)
    instance.trigger(e)
    assert received == [e]
    assert received[0] is e
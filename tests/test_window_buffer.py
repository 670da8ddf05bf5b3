import unittest

from ecgview.core.playback import PlaybackState
from ecgview.core.ringbuffer import RingBuffer
from ecgview.core.window_buffer import WindowBuffer


class RingBufferTest(unittest.TestCase):
    def test_rejects_non_positive_capacity(self):
        with self.assertRaises(ValueError):
            RingBuffer(0)

    def test_append_evicts_oldest_when_full(self):
        buf: RingBuffer[int] = RingBuffer(2)
        buf.append(1)
        buf.append(2)
        self.assertEqual(buf.snapshot(), [1, 2])
        buf.append(3)
        self.assertEqual(buf.snapshot(), [2, 3])
        self.assertEqual(len(buf), 2)

    def test_clear_empties_buffer(self):
        buf: RingBuffer[int] = RingBuffer(3)
        for i in range(5):
            buf.append(i)
        buf.clear()
        self.assertEqual(len(buf), 0)
        self.assertEqual(buf.snapshot(), [])
        buf.append(9)
        self.assertEqual(buf.snapshot(), [9])


class WindowBufferTest(unittest.TestCase):
    def test_fifo_eviction_once_capacity_exceeded(self):
        window = WindowBuffer(3)
        samples = [1, 2, 3, 4]
        cursor = 0
        states = []
        for _ in range(4):
            cursor, _appended = window.advance(samples, cursor)
            states.append(window.snapshot())

        self.assertEqual(states, [[1], [1, 2], [1, 2, 3], [2, 3, 4]])
        self.assertEqual(cursor, 4)
        self.assertEqual(len(window), 3)

    def test_wraparound_idles_for_one_step(self):
        window = WindowBuffer(5)
        samples = [10.0, 20.0]

        cursor, value = window.advance(samples, 0)
        self.assertEqual((cursor, value), (1, 10.0))
        cursor, value = window.advance(samples, cursor)
        self.assertEqual((cursor, value), (2, 20.0))

        cursor, value = window.advance(samples, cursor)
        self.assertEqual((cursor, value), (0, None))
        self.assertEqual(window.snapshot(), [10.0, 20.0])

        cursor, value = window.advance(samples, cursor)
        self.assertEqual((cursor, value), (1, 10.0))
        self.assertEqual(window.snapshot(), [10.0, 20.0, 10.0])

    def test_empty_samples_always_wrap(self):
        window = WindowBuffer(2)
        self.assertEqual(window.advance([], 0), (0, None))
        self.assertEqual(window.snapshot(), [])

    def test_negative_cursor_is_rejected(self):
        with self.assertRaises(ValueError):
            WindowBuffer(2).advance([1.0], -1)


class PlaybackStateTest(unittest.TestCase):
    def test_replace_samples_resets_window_and_cursor(self):
        state = PlaybackState(points_to_show=4)
        state.replace_samples([1, 2, 3])
        for _ in range(3):
            state.step()
        self.assertEqual(state.visible(), [1.0, 2.0, 3.0])
        self.assertEqual(state.cursor, 3)

        state.replace_samples([7, 8])
        self.assertEqual(state.visible(), [])
        self.assertEqual(state.cursor, 0)
        self.assertEqual(state.samples, (7.0, 8.0))

        self.assertEqual(state.step(), 7.0)
        self.assertEqual(state.visible(), [7.0])

    def test_cursor_stays_within_bounds(self):
        state = PlaybackState(points_to_show=2)
        state.replace_samples([1, 2, 3])
        for _ in range(20):
            state.step()
            self.assertTrue(0 <= state.cursor <= len(state.samples))
            self.assertLessEqual(len(state.window), 2)


if __name__ == "__main__":
    unittest.main()

# standard libraries
import logging
import unittest

# third party libraries
# None

# local libraries
from nion.hostui import Context
from nion.hostui import Periodic
from nion.hostui import TestHost


class TestPeriodicClass(unittest.TestCase):

    def setUp(self):
        self.calls = list()

    def tearDown(self):
        pass

    def __count(self):
        self.calls.append(len(self.calls))

    def test_task_does_nothing_until_started(self):
        task = Periodic.PeriodicTask(self.__count, 1.0)
        self.assertFalse(task.tick(0.0))
        self.assertEqual([], self.calls)

    def test_task_runs_at_most_once_per_interval(self):
        task = Periodic.PeriodicTask(self.__count, 1.0)
        task.start()
        self.assertTrue(task.tick(10.0))
        self.assertFalse(task.tick(10.5))
        self.assertTrue(task.tick(11.0))
        self.assertTrue(task.tick(13.0))
        self.assertEqual(3, len(self.calls))

    def test_stopped_task_does_not_run(self):
        task = Periodic.PeriodicTask(self.__count, 0.0)
        task.start()
        task.tick(0.0)
        task.stop()
        self.assertFalse(task.is_running)
        self.assertFalse(task.tick(5.0))
        self.assertEqual(1, len(self.calls))

    def test_task_uses_clock_when_no_time_given(self):
        now = [0.0]
        task = Periodic.PeriodicTask(self.__count, 1.0, clock=lambda: now[0])
        task.start()
        task.tick()
        task.tick()
        now[0] = 1.0
        task.tick()
        self.assertEqual(2, len(self.calls))

    def test_scheduler_ticks_tasks_and_replaces_by_key(self):
        scheduler = Periodic.Scheduler()
        task1 = Periodic.PeriodicTask(self.__count, 0.0)
        task2 = Periodic.PeriodicTask(self.__count, 0.0)
        task1.start()
        task2.start()
        scheduler.add_task("watch", task1)
        scheduler.periodic(0.0)
        scheduler.add_task("watch", task2)
        self.assertFalse(task1.is_running)
        self.assertIs(task2, scheduler.get_task("watch"))
        scheduler.periodic(1.0)
        self.assertEqual(2, len(self.calls))
        scheduler.clear_task("watch")
        self.assertFalse(task2.is_running)
        self.assertEqual(0, len(scheduler))
        scheduler.periodic(2.0)
        self.assertEqual(2, len(self.calls))

    def test_scheduler_runs_task_on_every_periodic_call_until_cleared(self):
        scheduler = Periodic.Scheduler()
        task = Periodic.PeriodicTask(self.__count, 0.0)
        task.start()
        scheduler.add_task("count", task)
        for now in range(3):
            scheduler.periodic(float(now))
        self.assertEqual(3, len(self.calls))
        scheduler.clear_task("count")
        scheduler.periodic(3.0)
        self.assertEqual(3, len(self.calls))
        task.start()
        scheduler.add_task("count", task)
        scheduler.periodic(4.0)
        self.assertEqual(4, len(self.calls))

    def test_task_clearing_itself_is_not_run_again(self):
        scheduler = Periodic.Scheduler()

        def count_then_clear():
            self.__count()
            scheduler.clear_task("once")

        task = Periodic.PeriodicTask(count_then_clear, 0.0)
        task.start()
        scheduler.add_task("once", task)
        scheduler.periodic(0.0)
        scheduler.periodic(1.0)
        self.assertEqual(1, len(self.calls))
        self.assertIsNone(scheduler.get_task("once"))

    def test_scheduler_uses_clock_when_no_time_given(self):
        now = [0.0]
        scheduler = Periodic.Scheduler(clock=lambda: now[0])
        task = Periodic.PeriodicTask(self.__count, 1.0)
        task.start()
        scheduler.add_task("count", task)
        scheduler.periodic()
        scheduler.periodic()
        now[0] = 1.0
        scheduler.periodic()
        self.assertEqual(2, len(self.calls))


class TestVisibilityWatcherClass(unittest.TestCase):

    def setUp(self):
        self.host = TestHost.Host()
        self.context = Context.HostUIContext(self.host)
        self.header = self.context.container({"visible": False, "name": "header"})
        self.close_widget = self.context.container({"visible": False, "name": "close"})
        self.reloading = False

    def tearDown(self):
        pass

    def test_widgets_are_revealed_when_condition_holds(self):
        revealed = list()
        watcher = Periodic.VisibilityWatcher(self.context, [self.header, self.close_widget], lambda: self.reloading,
                                             on_revealed=lambda: revealed.append(True))
        watcher.start()
        watcher.tick(0.0)
        self.assertFalse(self.header.visible)
        self.reloading = True
        watcher.tick(0.05)
        self.assertFalse(self.header.visible)
        watcher.tick(0.1)
        self.assertTrue(self.header.visible)
        self.assertTrue(self.close_widget.visible)
        self.assertEqual([True], revealed)

    def test_watcher_keeps_revealing_until_stopped(self):
        watcher = Periodic.VisibilityWatcher(self.context, [self.header], lambda: self.reloading, interval=1.0)
        scheduler = Periodic.Scheduler()
        scheduler.add_task("reveal", watcher)
        watcher.start()
        self.reloading = True
        scheduler.periodic(0.0)
        self.assertTrue(self.header.visible)
        watcher.hide()
        self.assertFalse(self.header.visible)
        scheduler.periodic(1.0)
        self.assertTrue(self.header.visible)
        watcher.hide()
        watcher.stop()
        scheduler.periodic(2.0)
        self.assertFalse(self.header.visible)

    def test_watcher_once_stops_after_first_reveal(self):
        watcher = Periodic.VisibilityWatcher(self.context, [self.header], lambda: True, interval=0.0, once=True)
        watcher.start()
        watcher.tick(0.0)
        self.assertTrue(self.header.visible)
        self.assertFalse(watcher.is_running)


if __name__ == '__main__':
    logging.getLogger().setLevel(logging.DEBUG)
    unittest.main()

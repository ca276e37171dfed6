import unittest

import tests.fakes as fakes
import tkui.bindings as bindings
from tkui.exceptions import TclException
from tkui.widgets import Button, MainWindow


class TestEvent(unittest.TestCase):
  def test_parse(self):
    event = bindings.Event.parse(['10', '20', '110', '120', '1', '??', '??', '.b1', '??'])
    self.assertEqual(event, bindings.Event(10, 20, 110, 120, 1, None, None, '.b1', None))
  
  def test_parse_key(self):
    event = bindings.Event.parse(['0', '0', '0', '0', '??', '38', 'a', '.e1', '??'])
    self.assertEqual(event.keycode, 38)
    self.assertEqual(event.keysym, 'a')
  
  def test_parse_short(self):
    self.assertEqual(bindings.Event.parse(['5']), bindings.Event(x=5))
  
  def test_event_name(self):
    self.assertEqual(bindings.eventName('Enter'), '<Enter>')
    self.assertEqual(bindings.eventName('<Button-1>'), '<Button-1>')
    self.assertEqual(bindings.eventName('<<ComboboxSelected>>'), '<<ComboboxSelected>>')


class TestBindings(unittest.TestCase):
  def setUp(self):
    self.app, self.interp = fakes.makeApp()
    self.button = Button(MainWindow(self.app), 'OK')
    self.handler = self.interp.commands[bindings.BINDINGS_HANDLER]
  
  def test_bind(self):
    events = []
    self.button.bind(bindings.Events.click, events.append)
    
    self.assertEqual(
      self.interp.scripts[-1],
      'bind .b1 <Button-1> {%s .b1 <Button-1> %s}' % (bindings.BINDINGS_HANDLER, bindings.EVENT_SUBSTITUTIONS)
    )
    
    self.handler('.b1', '<Button-1>', '3', '4', '??', '??', '1', '??', '??', '.b1', '??')
    self.assertEqual(events, [bindings.Event(3, 4, None, None, 1, None, None, '.b1', None)])
  
  def test_unbind(self):
    self.button.bind('Enter', lambda ev: None)
    self.button.unbind('Enter')
    
    self.assertEqual(self.interp.scripts[-1], 'bind .b1 <Enter> {}')
    self.assertFalse(self.app.bindings().isBound(self.button, 'Enter'))
  
  def test_dispatch_unbound(self):
    entered = []
    self.button.bind('Enter', entered.append)
    
    with self.assertRaises(TclException):
      self.handler('.b1', '<Leave>')
    
    self.handler('.b1', '<Enter>')
    self.assertEqual(len(entered), 1)
  
  def test_unbind_all(self):
    self.button.bind('Enter', lambda ev: None)
    self.button.bind('Leave', lambda ev: None)
    self.app.bindings().unbindAll(self.button)
    
    self.assertFalse(self.app.bindings().isBound(self.button, 'Enter'))
    self.assertFalse(self.app.bindings().isBound(self.button, 'Leave'))


if __name__ == '__main__': unittest.main()

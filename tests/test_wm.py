import unittest

import tests.fakes as fakes
import tkui.wm as wm
from tkui.exceptions import TkException
from tkui.widgets import MainWindow, Window


class TestGeometry(unittest.TestCase):
  def test_parse_geometry(self):
    self.assertEqual(wm.parseGeometry('200x100+10+20'), (200, 100, 10, 20))
  
  def test_parse_geometry_negative(self):
    self.assertEqual(wm.parseGeometry('10x10-5+-3'), (10, 10, -5, -3))
  
  def test_parse_geometry_bad(self):
    with self.assertRaises(TkException):
      wm.parseGeometry('large')


class TestWindowManager(unittest.TestCase):
  def setUp(self):
    self.app, self.interp = fakes.makeApp({
      'wm geometry .': '200x100+10+20',
      'wm maxsize .': '1920 1080',
      'wm minsize .': '1 1',
      'wm state .': 'normal',
      'wm title .': 'Demo',
      'wm attributes . -topmost': '0',
      'winfo screenwidth .': '1920',
      'winfo screenheight .': '1200'
    })
    self.wm = MainWindow(self.app).wm()
  
  @property
  def last(self): return self.interp.scripts[-1]
  
  def test_title(self):
    self.wm.setTitle('Paned window demo')
    self.assertEqual(self.last, 'wm title . {Paned window demo}')
    self.assertEqual(self.wm.getTitle(), 'Demo')
  
  def test_state(self):
    self.wm.setState(wm.TkWindowManager.STATE_ZOOMED)
    self.assertEqual(self.last, 'wm state . zoomed')
    self.assertEqual(self.wm.getState(), 'normal')
  
  def test_iconify(self):
    self.wm.iconify()
    self.assertEqual(self.last, 'wm iconify .')
    
    self.wm.deiconify()
    self.assertEqual(self.last, 'wm deiconify .')
  
  def test_sizes(self):
    self.wm.setMaxSize(800, 600)
    self.assertEqual(self.last, 'wm maxsize . 800 600')
    self.assertEqual(self.wm.getMaxSize(), (1920, 1080))
    
    self.wm.setMinSize(200, 100)
    self.assertEqual(self.last, 'wm minsize . 200 100')
    self.assertEqual(self.wm.getMinSize(), (1, 1))
  
  def test_attributes(self):
    self.wm.setAttribute('topmost', True)
    self.assertEqual(self.last, 'wm attributes . -topmost 1')
    self.assertEqual(self.wm.getAttribute('topmost'), '0')
    
    self.wm.setFullScreen()
    self.assertEqual(self.last, 'wm attributes . -fullscreen 1')
  
  def test_geometry(self):
    self.wm.setSize(300, 200)
    self.assertEqual(self.last, 'wm geometry . 300x200')
    self.assertEqual(self.wm.getSize(), (200, 100))
    
    self.wm.setPos(5, -5)
    self.assertEqual(self.last, 'wm geometry . +5-5')
    self.assertEqual(self.wm.getPos(), (10, 20))
  
  def test_screen_size(self):
    self.assertEqual(self.wm.getScreenSize(), (1920, 1200))
  
  def test_toplevel_window(self):
    win = Window(self.app)
    win.wm().iconify()
    self.assertEqual(self.last, 'wm iconify .w1')
    self.assertIs(win.wm(), win.wm())


if __name__ == '__main__': unittest.main()

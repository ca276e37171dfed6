import unittest

import tests.fakes as fakes
import tkui.themes as themes
from tkui.exceptions import TkException
from tkui.fonts import Font, TkFontManager


class TestBackend(unittest.TestCase):
  def test_ttk_is_available(self):
    self.assertTrue(themes.Backend.TTk.isAvailable())
  
  def test_missing_module(self):
    self.assertFalse(themes.BackendEnum('none', 'tkui_no_such_module').isAvailable())
  
  def test_detect_follows_fallback_order(self):
    detected = themes.Backend.detect()
    self.assertIn(detected, themes.Backend.fallbackOrder)
    self.assertTrue(detected.isAvailable())
  
  def test_equality(self):
    self.assertEqual(themes.Backend.TTk, themes.BackendEnum('ttk', 'tkinter.ttk'))
    self.assertNotEqual(themes.Backend.TTk, themes.Backend.ThemedTk)


class TestThemeManager(unittest.TestCase):
  def setUp(self):
    self.app, self.interp = fakes.makeApp({
      'ttk::style theme names': 'clam alt default',
      'return $ttk::currentTheme': 'clam',
      'ttk::style lookup TButton -font': '',
      'ttk::style lookup TButton -padding': '3'
    })
    self.themes = themes.TkThemeManager(self.app, themes.Backend.TTk)
  
  def test_themes(self):
    self.assertEqual(self.themes.themes(), ['clam', 'alt', 'default'])
  
  def test_current_theme(self):
    self.assertEqual(self.themes.currentTheme(), 'clam')
  
  def test_use_theme(self):
    self.assertIs(self.themes.useTheme('alt'), self.themes)
    self.assertEqual(self.interp.scripts[-1], 'ttk::style theme use alt')
  
  def test_use_unknown_theme(self):
    with self.assertRaises(TkException):
      self.themes.useTheme('nope')
  
  def test_configure(self):
    self.themes.configure('TButton', padding=6, font='TkFixedFont')
    self.assertEqual(self.interp.scripts[-1], 'ttk::style configure TButton -padding 6 -font TkFixedFont')
  
  def test_lookup(self):
    self.assertEqual(self.themes.lookup('TButton', 'padding'), '3')
    self.assertEqual(self.themes.lookup('TButton', 'font', 'TkDefaultFont'), 'TkDefaultFont')


class TestFontManager(unittest.TestCase):
  def setUp(self):
    self.app, self.interp = fakes.makeApp({
      'font families': 'Courier Helvetica',
      'font names': 'TkDefaultFont TkFixedFont',
      'font actual TkDefaultFont': '-family Helvetica -size 10 -weight bold -slant roman -underline 0 -overstrike 0',
      'font measure TkDefaultFont {hello world}': '71'
    })
    self.fonts = self.app.getFontManager()
  
  def test_families(self):
    self.assertEqual(self.fonts.families(), ['Courier', 'Helvetica'])
    self.assertEqual(self.fonts.names(), ['TkDefaultFont', 'TkFixedFont'])
  
  def test_actual(self):
    self.assertEqual(self.fonts.getDefaultFont(), Font('Helvetica', 10, 'bold'))
  
  def test_create_font(self):
    self.fonts.createFont('Big', Font('Helvetica', 20))
    self.assertEqual(
      self.interp.scripts[-1],
      'font create Big -family Helvetica -size 20 -weight normal -slant roman -underline 0 -overstrike 0'
    )
    
    self.fonts.deleteFont('Big')
    self.assertEqual(self.interp.scripts[-1], 'font delete Big')
  
  def test_measure(self):
    self.assertEqual(self.fonts.measure(TkFontManager.DEFAULT, 'hello world'), 71)


if __name__ == '__main__': unittest.main()

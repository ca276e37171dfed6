import os
import tempfile
import logging
import unittest

import tests.fakes as fakes
import tkui.config as config
import tkui.system as system
from tkui.exceptions import UnsupportedOSException


class FakeFactory(config.AppFactory):
  results = {'ttk::style theme names': 'clam alt default'}
  
  def createApp(self, argv=None):
    self.app, self.interp = fakes.makeApp(self.results, argv=argv)
    return self.app


class TestAppConfig(unittest.TestCase):
  def test_from_env(self):
    cfg = config.AppConfig.fromEnv({
      'TKUI_THEME': 'alt',
      'TKUI_SCALING': '1.5',
      'TKUI_DEBUG': 'yes',
      'TKUI_LOG_FILE': 'tkui.log'
    })
    
    self.assertEqual(cfg.theme, 'alt')
    self.assertEqual(cfg.scaling, 1.5)
    self.assertTrue(cfg.debug)
    self.assertEqual(cfg.logFile, 'tkui.log')
  
  def test_from_empty_env(self):
    cfg = config.AppConfig.fromEnv({})
    
    self.assertIsNone(cfg.theme)
    self.assertIsNone(cfg.scaling)
    self.assertFalse(cfg.debug)
    self.assertIsNone(cfg.logFile)
  
  def test_debug_values(self):
    for value in ('1', 'true', 'ON', ' yes '):
      self.assertTrue(config.AppConfig.fromEnv({'TKUI_DEBUG': value}).debug)
    
    for value in ('0', 'no', ''):
      self.assertFalse(config.AppConfig.fromEnv({'TKUI_DEBUG': value}).debug)
  
  def test_bad_scaling(self):
    with self.assertRaises(ValueError):
      config.AppConfig.fromEnv({'TKUI_SCALING': 'big'})
  
  def test_resolve_theme(self):
    self.assertEqual(config.AppConfig(theme='alt').resolveTheme(), 'alt')
    self.assertIsNone(config.AppConfig().resolveTheme())
  
  def test_resolve_auto_theme(self):
    try: expected = system.detect().defaultTheme
    except UnsupportedOSException: expected = None
    
    self.assertEqual(config.AppConfig(theme=config.THEME_AUTO).resolveTheme(), expected)
  
  def test_setup_logging(self):
    with tempfile.TemporaryDirectory() as directory:
      path = os.path.join(directory, 'tkui.log')
      logger = logging.getLogger('tkui')
      level = logger.level
      
      try:
        config.AppConfig(debug=True, logFile=path).setupLogging()
        config.AppConfig(debug=True, logFile=path).setupLogging()
        
        handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        self.assertEqual(len(handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)
      finally:
        for handler in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
          logger.removeHandler(handler)
          handler.close()
        
        logger.setLevel(level)


class TestAppFactory(unittest.TestCase):
  def test_create(self):
    factory = FakeFactory(config.AppConfig(theme='alt', scaling=1.25))
    app = factory.create({'-name': 'demo'})
    
    self.assertTrue(app.tk().isLoaded)
    self.assertIn('tk scaling 1.25', factory.interp.scripts)
    self.assertEqual(factory.interp.scripts[-1], 'ttk::style theme use alt')
    self.assertEqual(factory.interp.argv().items(), ('-name', 'demo'))
  
  def test_create_bad_theme_is_logged(self):
    factory = FakeFactory(config.AppConfig(theme='nope'))
    
    with self.assertLogs('tkui.config', 'ERROR'):
      app = factory.create()
    
    self.assertTrue(app.hasTtk())
  
  def test_create_defaults(self):
    factory = FakeFactory(config.AppConfig())
    factory.create()
    
    self.assertNotIn('tk scaling', ' '.join(factory.interp.scripts))
    self.assertFalse(any(s.startswith('ttk::style theme use') for s in factory.interp.scripts))


class TestSystem(unittest.TestCase):
  def test_detect(self):
    self.assertIsInstance(system.detect('Linux'), system.Linux)
    self.assertIsInstance(system.detect('Windows'), system.Windows)
    self.assertIsInstance(system.detect('Darwin'), system.MacOS)
  
  def test_detect_unsupported(self):
    with self.assertRaises(UnsupportedOSException):
      system.detect('Plan9')
  
  def test_default_theme(self):
    self.assertEqual(system.detect('Linux').defaultTheme, 'clam')


if __name__ == '__main__': unittest.main()

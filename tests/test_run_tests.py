"""
Unit tests for the run_tests.py helper.
"""

import sys
from unittest.mock import Mock, patch

import run_tests


class TestRunTests:
    """Test cases for building and running the pytest command."""
    
    def test_default_command(self):
        assert run_tests.build_command([]) == [sys.executable, '-m', 'pytest', 'tests', '-v', '--tb=short']
    
    def test_arguments_passed_through(self):
        assert run_tests.build_command(['-k', 'sizes'])[3:] == ['-k', 'sizes']
    
    def test_main_returns_pytest_exit_code(self):
        with patch('run_tests.subprocess.run', return_value=Mock(returncode=1)) as mock_run:
            assert run_tests.main(['tests/test_dot.py']) == 1
        
        cmd = mock_run.call_args[0][0]
        assert cmd[-1] == 'tests/test_dot.py'
        assert mock_run.call_args[1]['cwd'] == run_tests.PROJECT_ROOT

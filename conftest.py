import os

import pytest


def pytest_addoption(parser):
    parser.addoption("--show_plot", action="store", default="False",
        help="show plots: True or False")


@pytest.fixture
def show_plot(request):
    """This callable fixture allows us to either show plots when running test for visual inspection,
    or close them and at least test the absence of exceptions when running test automated"""
    flag = request.config.getoption("--show_plot", default=None)
    if flag is None:
        flag = os.environ.get('SHOW_PLOT', 'False')
    import matplotlib
    if flag != 'True':
        matplotlib.use('Agg')
    import matplotlib.pyplot as plt
    if flag == 'True':
        return plt.show
    else:
        return lambda: plt.close('all')

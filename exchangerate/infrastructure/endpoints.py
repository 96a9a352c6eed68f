SYMBOLS = 'symbols'
CRYPTOCURRENCIES = 'cryptocurrencies'
SOURCES = 'sources'
LATEST = 'latest'
CONVERT = 'convert'
TIMESERIES = 'timeseries'
FLUCTUATION = 'fluctuation'

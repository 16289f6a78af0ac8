import logging


class PlotLogger:

    def __init__(self, name, debug=False):
        self._logger = logging.getLogger(name)
        if not self._logger.handlers:
            sh = logging.StreamHandler()
            fmt = logging.Formatter('%(name)-12s: %(levelname)-8s %(message)s')
            sh.setFormatter(fmt)
            self._logger.addHandler(sh)
        self._logger.setLevel(logging.DEBUG if debug else logging.NOTSET)

    @property
    def logger(self):
        return self._logger

    def _write_cell_to_log(self, row, col, index, geometry):
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug('{:*^30}'.format(' cell {} '.format(index)))
            self._logger.debug('row, col = {}, {}'.format(row, col))
            self._logger.debug('geometry = {}'.format(geometry))

    def _write_hist_to_log(self, centers, weights):
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug('nbins = {}'.format(len(centers)))
            self._logger.debug('total weight = {}'.format(weights.sum()))

    def _write_levels_to_log(self, thresholds):
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug('credible levels = {}'.format(thresholds))

    def _write_filter_to_log(self, num_in, num_out):
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug('scatter filter kept {} of {} points'.format(
                num_out, num_in))

    def _write_skip_to_log(self, message):
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(message)

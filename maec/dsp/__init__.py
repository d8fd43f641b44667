"""Signal processing helpers: windows, sinc, Fourier bases, convolution and IIR filters."""
"""Traffic simulation sub-package; it provides no modules yet."""
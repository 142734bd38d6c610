"""The Intcode virtual machine and the I/O devices that drive it."""
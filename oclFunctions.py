# Author: Martin Smith
# Created on: 7/18/12
# Updated on: 10/19/26

import logging

import numpy as np
import pyopencl as cl

from matlib import BackendException

logger = logging.getLogger(__name__)

preferred = 'GPU'


def round_up(number, multiple=1):
    if number == round_down(number, multiple):
        return number
    else:
        return round_down(number+multiple, multiple)


def round_down(number, multiple=1):
    return int(number/multiple)*multiple


def matrix_multiply(A,B):
    try:
        devices = get_devices()
    except cl.Error as e:
        raise BackendException("Listing OpenCL devices failed: %s" % e)
    if not devices:
        raise BackendException("No OpenCL devices found")
    try:
        dev = devices[preferred]
    except KeyError:
        dev_type = sorted(devices)[0]
        dev = devices[dev_type]
        logger.info("No %s device, falling back to %s", preferred, dev_type)
    logger.info("Using: %s", dev.name)
    try:
        ctx = cl.Context([dev])
        queue = cl.CommandQueue(ctx)
        return use_naive_kernel(ctx, queue, dev, A, B)
    except cl.Error as e:
        raise BackendException("OpenCL multiply failed on %s: %s" % (dev.name, e))


def get_devices():
    try:
        platforms = cl.get_platforms()
    except cl.Error as e:
        raise BackendException("No OpenCL platform available: %s" % e)
    if not platforms:
        raise BackendException("No OpenCL platform available")
    my_platform = platforms[0]
    for found_platform in platforms:
        if found_platform.name == 'NVIDIA CUDA':
            my_platform = found_platform
    logger.debug("Selected platform: %s", my_platform.name)

    devices = {}
    try:
        for device in my_platform.get_devices():
            devices[cl.device_type.to_string(device.type)] = device
    except cl.Error as e:
        raise BackendException("No OpenCL device on %s: %s" % (my_platform.name, e))
    return devices


def use_naive_kernel(ctx, queue, dev, A, B):
    A_cache = np.ascontiguousarray(A, dtype=np.float64)
    B_cache = np.ascontiguousarray(B, dtype=np.float64)
    C_shape = (A_cache.shape[0], B_cache.shape[1])
    C_cache = np.zeros(C_shape, dtype=np.float64)
    if C_cache.size == 0 or A_cache.shape[1] == 0:
        return C_cache

    mf = cl.mem_flags
    A_buffer = cl.Buffer(ctx, mf.READ_ONLY | mf.COPY_HOST_PTR, hostbuf=A_cache)
    B_buffer = cl.Buffer(ctx, mf.READ_ONLY | mf.COPY_HOST_PTR, hostbuf=B_cache)
    C_buffer = cl.Buffer(ctx, mf.WRITE_ONLY, C_cache.nbytes)

    max_wg_size = dev.get_info(cl.device_info.MAX_WORK_GROUP_SIZE)
    global_size = (round_up(C_cache.size, max_wg_size),)
    local_size = None
    logger.debug("Local Size: %s Global Size: %s", local_size, global_size)

    prg = cl.Program(ctx, naive_kernel()).build()
    event = prg.naiveMatMul(queue,
                            global_size,
                            local_size,
                            A_buffer,
                            B_buffer,
                            C_buffer,
                            np.int32(A_cache.shape[1]),
                            np.int32(C_shape[0]), # row boundary
                            np.int32(C_shape[1])) # col boundary
    event.wait()
    cl.enqueue_copy(queue, C_cache, C_buffer)
    return C_cache


def naive_kernel():
    return """
#pragma OPENCL EXTENSION cl_khr_fp64 : enable

__kernel void naiveMatMul(
                __global const double* A,
                __global const double* B,
                __global double* C,
                int shared,
                int rowBound,
                int colBound)
{
    int gid = get_global_id(0);
    int row = gid / colBound;
    int col = gid % colBound;
    if (row >= rowBound)
        return;

    double sum = 0.0;
    for (int i = 0; i < shared; i++)
    {
        sum += A[(row * shared) + i] * B[(i * colBound) + col];
    }
    C[gid] = sum;
}
    """

# -*- coding: utf-8 -*-
import grpc

PROTO_FILE = "greeter_client/helloworld.proto"

# 运行时由 grpc_tools 编译, 不落盘生成 *_pb2.py
pb2, pb2_grpc = grpc.protos_and_services(PROTO_FILE)
